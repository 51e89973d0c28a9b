# genpattern

`genpattern` arranges sets of images on a seamless, tileable canvas so that
none of them overlap. Each image is turned into a filled silhouette from its
alpha channel. Its position is then chosen by simulated annealing on a canvas
that wraps around at its edges. An image that crosses an edge is reported at
every position where a copy of it touches the canvas, so the result tiles
without seams.

## Installation

```
pip install .
```

The only runtime dependency is `numpy`. To run the tests:

```
pip install .[test]
pytest
```

## Quick start

```python
from genpattern.api import AlphaImage, Schedule, ScheduleType, genpattern

# A 40x40 fully opaque square, with its alpha values given row by row.
square = bytes([255]) * (40 * 40)

collections = [
    [AlphaImage(40, 40, square) for _ in range(5)],
]

placements = genpattern(
    collections,
    canvas_width=200,
    canvas_height=200,
    threshold=64,
    offset_radius=2,
    collection_offset_radius=4,
    schedule=Schedule(ScheduleType.EXPONENTIAL, 0.95),
    seed=42,
)

for collection in placements:
    for image_positions in collection:
        print(image_positions)  # a list of Point, empty if the image was not placed
```

`AlphaImage(width, height, data)` takes the alpha values as `bytes`, a
`bytearray`, a `memoryview`, a numpy array or any iterable of integers.
`Schedule.exponential(alpha)` and `Schedule.linear(k)` are shortcuts for
`Schedule(ScheduleType.EXPONENTIAL, alpha)` and
`Schedule(ScheduleType.LINEAR, k)`.

The result is indexed by collection, then by image. Each entry holds up to four
`genpattern.geometry.Point` values (with `x` and `y` attributes): the top-left
corner of each copy of the image that touches the canvas, some of which may lie
at negative coordinates. The initial annealing temperature is 100.

## Concepts

- **Threshold**: a pixel whose alpha value is below the threshold counts as
  transparent. Transparent pixels that can be reached from the image border
  through other transparent pixels stay transparent, and every other pixel
  becomes solid (255). The threshold must be from 1 to 255.
- **Offset radius**: the least distance kept between images of different
  collections.
- **Collection offset radius**: the least distance kept between images of the
  same collection.
- **Cooling schedule**: sets how quickly the annealing temperature falls.
  `ExponentialSchedule(alpha)` sets the temperature to `t0 * alpha ** i` at
  step `i`. `LinearSchedule(k)` multiplies the temperature by `k` at each step.
  Both are in `genpattern.schedules`. The search for one image stops when the
  temperature falls to 0.0001 or below, and the image is then left unplaced.
- **Seed**: the same seed and inputs give the same placements.

## Lower-level API

The building blocks can also be used on their own:

```python
from genpattern.images import ImgAlphaFilledContour
from genpattern.generator import PatternGenerator
from genpattern.schedules import ExponentialSchedule

img = ImgAlphaFilledContour(bytes([255]) * 900, 30, 30, 64)
pg = PatternGenerator(200, 200, [[img, img]], 1, 1, 100.0)
result = pg.generate(42, ExponentialSchedule(0.9))
```

- `genpattern.images` holds `ImgAlpha` (raw alpha values),
  `ImgAlphaFilledContour` (the filled silhouette), `BitImage` (a boolean mask,
  built with `BitImage.from_alpha`, with `n_pixels()` counting filled pixels)
  and `OffsettedBitImage` (a mask widened by a disk of a given radius).
- `genpattern.geometry` holds `Point`, `Box` and `generate_disk(r)`, which
  returns a boolean `(2r+1, 2r+1)` disk mask.
- `genpattern.canvas.Canvas(width, height, rng)` is the wrapping bit canvas,
  driven by a `random.Random`. Its `intersection_area`, `add_image` and
  `optimize_placement` methods let you run placement steps yourself;
  `optimize_placement` returns a `Point` or `None`.

Invalid input raises `ValueError`. This covers zero canvas or image sizes, an
empty collection, an image that is not strictly smaller than the canvas, too
little pixel data, a threshold outside 1..255 and an unknown schedule type.

## What it does not do

`genpattern` is a library only: it has no command-line program. It does not
read or write image files and does not draw the finished pattern; it takes
alpha values you have already extracted and returns positions, leaving the
compositing to you.