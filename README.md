# coursegen

`coursegen` builds target courses for path-following robots. A course is a
list of planar poses along circular arcs. The poses are sampled at a fixed
step along the x axis. You can move the course to any start point in the
plane and turn it to any heading.

There are four course shapes:

- **Simple** (`coursegen.simple.SimplePathCreator`): half circles that all
  have one radius. They lie above and below the x axis in turn. The poses are
  in the `odom` frame.
- **Quarter** (`coursegen.quarter.QuarterPathCreator`): quarter circles of one
  radius. Their centres lie above and below the axis in turn. The poses are in
  the `map` frame.
- **Fusion** (`coursegen.fusion.FusionPathCreator`): half circles, each with
  its own radius taken from a list. The poses are in the `map` frame.
- **Mix quarter** (`coursegen.mix_quarter.MixQuarterPathCreator`): arcs, each
  with its own radius taken from a list. The poses are in the `map` frame.

## Installation

```
pip install coursegen
```

The package uses only the Python standard library. It needs Python 3.10 or
newer.

## Command line

Installing the package gives you the `coursegen` command. It takes one
sub-command for each course shape: `simple`, `quarter`, `fusion` and
`mix-quarter`.

```
coursegen --help
coursegen simple --radius 5 --course-length 30
coursegen fusion --all-radius 2 3 4 --max-course-length 50 -o course.csv
```

Options for `simple` and `quarter`:

| Option | Default | Meaning |
|---|---|---|
| `--radius` | `5.0` | turn radius [m] |
| `--course-length` | `30.0` | course length [m] |

Options for `fusion` and `mix-quarter`:

| Option | Default | Meaning |
|---|---|---|
| `--all-radius` | required | one or more turn radii, one for each segment [m] |
| `--max-course-length` | `50.0` | longest course allowed [m] |

Options that every shape takes:

| Option | Default | Meaning |
|---|---|---|
| `--init-x` | `0.0` | x of the start point [m] |
| `--init-y` | `0.0` | y of the start point [m] |
| `--init-theta` | `0.0` | course heading [rad] |
| `--resolution` | `0.1` | step along x [m] |
| `--hz` | `10` | loop frequency [Hz]; stored on the creator, nothing else |
| `-o`, `--output` | standard output | file that gets the points |

The command writes one `x,y` line for each pose. When it is done it prints
`Create path finish!` on standard error. For `fusion` and `mix-quarter` it
prints `----- Create path finish! -----` and then `Path length is <length> [m]`
instead. If a setting is invalid, for example a radius that is not positive,
the command prints a usage error and exits.

## Library use

```python
from coursegen.simple import SimplePathCreator

creator = SimplePathCreator()        # radius 5 m, length 30 m, step 0.1 m
path = creator.create_course()

print(len(path))                     # number of sampled poses
for x, y in path.points():
    print(f"{x:.3f},{y:.3f}")
```

`SimplePathCreator` and `QuarterPathCreator` are dataclasses with these
fields: `radius`, `init_x`, `init_y`, `init_theta`, `course_length`,
`resolution` and `hz`.

`FusionPathCreator` and `MixQuarterPathCreator` take `all_radius`, a sequence
that holds one radius for each arc. They also take `init_x`, `init_y`,
`init_theta`, `max_course_length`, `resolution` and `hz`. They stop after the
last arc or at `max_course_length`, whichever comes first. After
`create_course()` runs, their `course_length` attribute holds the length the
course reached along the x axis. `semicircle_number` gives the number of arcs.

In `MixQuarterPathCreator`, an entry of `all_radius` that is smaller than half
a step does not change the radius or the centre of the previous arc.

`create_course()` returns a `coursegen.geometry.Path`. It has a `frame_id` and
a list of `Pose` objects, which are frozen dataclasses with `x`, `y` and
`frame_id`. You can iterate over a `Path`, call `len()` on it, and get the
positions as `(x, y)` pairs with `Path.points()`.

To move and turn points yourself, use `coursegen.geometry.place_point`:

```python
from coursegen.geometry import place_point

place_point(1.0, 0.0, init_x=2.0, init_y=3.0, init_theta=0.0)   # (3.0, 3.0)
```

### Checks and limits

- The radii must be positive. For mix quarter, only the first radius must be.
  Otherwise the constructor raises `ValueError`. An empty `all_radius` also
  raises `ValueError`.
- The step must be positive. In the simple, quarter and fusion shapes, x is
  snapped to a 0.1 m grid, so a step that rounds to zero on that grid is
  rejected.
- If a sample x falls outside the circle of the current arc, that pose gets
  NaN coordinates.

## What it does not do

`coursegen` computes courses and writes them out. It does not send them to a
robot or a message bus, and it does not republish them in a loop. The `hz`
setting is kept on each creator but does nothing else.

## Running the tests

```
pip install "coursegen[test]"
pytest
```