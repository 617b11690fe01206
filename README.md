# asteroidfield

A small arcade asteroid shooter built with pygame. Fly a ship around a
wrapping playfield, shoot the rocks and keep your three lives as long as
you can. Big rocks split into two medium ones, medium rocks split into two
small ones, and small rocks are destroyed outright.

## Installing

```
pip install .
```

## Assets

The game reads its images from `assets/images/<name>.png` and its sounds
from `assets/sounds/<name>.wav`, under a base directory (the current
directory unless `--base-dir` is given).

Images loaded: `missing`, `life`, `big_rock_1`, `med_rock_1`, `med_rock_2`,
`med_rock_3`, `small_rock_1`, `ship`, `fire`, `bullet`.

Sounds loaded: `laser_shoot` (gain 0.7), `engine_rumble` (gain 1.0),
`short_explosion` (gain 0.6).

A sound that cannot be loaded is logged and skipped; the game plays on
without it. An image that cannot be loaded is logged too, but spawning an
entity with a missing image raises `asteroidfield.entity.SpriteNotFoundError`,
so the ship, bullet, fire and rock images are needed to play.

## Playing

```
asteroidfield
asteroidfield --base-dir path/to/game --seed 42
```

| Option       | Meaning                                                  |
|--------------|----------------------------------------------------------|
| `--base-dir` | directory holding the `assets` folder (default: `.`)     |
| `--seed`     | seed of the random generator for rock placement (default: 0) |

| Key     | Action                                   |
|---------|------------------------------------------|
| `A`     | turn left                                |
| `D`     | turn right                               |
| `W`     | thrust forward                           |
| `Space` | fire                                     |
| `P`     | toggle debug outlines and key logging    |

The window is 1080×720 and the game advances in fixed steps of 16 ms.
Rocks and the ship wrap around the screen edges; bullets disappear once
they leave it. When a rock touches the ship, a life is lost and the ship
returns to the centre. Remaining lives are drawn in the top-left corner.
With no lives left the ship is hidden and can no longer thrust or fire.
Close the window to quit.

Points per rock destroyed: big 300, medium 200, small 100.

## What it does not do

There is no menu, no pause, no restart after game over and no game-over
screen. The score is kept in `RunGameScene.state.score` but is not drawn
on screen, and no scores are stored between runs.

## Using the engine

The pieces of the game can be used on their own:

- `asteroidfield.vector_math` – `Vec2` (with `+`, `-`, unary `-` and
  scalar `*`), `lerp`, `distance`, `deg_to_rad`, `rad_to_deg`.
- `asteroidfield.sprite` – `SpriteManager` loads images from a base
  directory (`load_sprite`), registers surfaces directly (`add_sprite`),
  looks them up (`get_sprite`, `sprite_names`) and draws them
  (`render_sprite`).
- `asteroidfield.sound` – `AudioManager` with per-sound gain
  (`load_audio`, `set_gain`), a master volume (`set_master_volume`),
  `play`, `pause`, `reset` and `get_audio_info`; missing sounds are
  ignored. A custom `loader` can replace `pygame.mixer.Sound`.
- `asteroidfield.input` – `InputManager` takes pygame events
  (`handle_input`) and answers `check_key`, `check_key_pressed` and
  `check_key_release` against the state at the last `update`.
- `asteroidfield.entity` – `EntityManager` spawns and kills sprite-backed
  `Entity` objects and keeps named variables for each (`set_var`,
  `get_var`, `has_var`, `remove_var`, `clear_vars`); `get_var` raises
  `VariableError` for an unknown entity or key, or a value of the wrong type.
- `asteroidfield.scene` – `Scene` is the abstract base for game stages;
  `SceneManager` holds the current scene, hands it the managers and runs
  its update and render steps.
- `asteroidfield.gamerun` – `RunGameScene`, the game itself, with an
  injectable `random.Random`.
- `asteroidfield.app` – `FrameClock` for the fixed-step loop, `load_sprites`,
  `load_audios` and `main`.

## Running the tests

```
pip install .[test]
pytest
```