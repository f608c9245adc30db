# geomkit

Plane geometry in two models: the ordinary Euclidean plane and the
hyperbolic plane, whose points are stored in Beltrami–Klein coordinates
inside the unit disk and can be shown on the Poincaré disk. The package
provides geometric objects, view transformations that save their state as
JSON-ready dictionaries, and a set of classic constructions and
measurements. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Numeric helpers

`geomkit.numeric` holds the comparisons used everywhere, with an absolute
tolerance `EPS = 1e-9`: `eq`, `le`, `gr`, `leq`, `geq`. It also has `sq`,
`sgn`, `circle_rect` and `solve_quadratic(a, b, c)`, which returns a tuple
of zero, one or two real roots.

`geomkit.cramer` solves small linear systems by Cramer's rule:
`determinant(a)`, `cramer(a, c)` and `cramer_augmented(b)` (an
`n x (n + 1)` augmented matrix). The solvers return `None` when the
determinant is zero and raise `ValueError` for badly shaped input.

## Euclidean geometry

Objects are immutable dataclasses: `Point` (`geomkit.euclid_point`),
`Line` (`geomkit.euclid_line`), `Circle` (`geomkit.euclid_circle`),
`Segment` (`geomkit.euclid_segment`) and `Arc` (`geomkit.euclid_arc`).
Points support `+`, `-`, scaling by a number, and `==` within the tolerance.

```python
from geomkit.euclid_point import Point, dist
from geomkit.euclid_line import Line, intersect_lines
from geomkit.euclid_circle import Circle
from geomkit import euclid_constructions as ec

a, b, c = Point(0, 0), Point(4, 0), Point(0, 3)

dist(b, c)                          # 5.0
ec.middle(a, b)                     # Point(2, 0)
ec.circle_by_three_points(a, b, c)  # circumcircle, or None for collinear points
ec.incircle(a, b, c)                # inscribed circle
ec.angle(b, a, c)                   # 90.0 (degrees, between 0 and 180)

l1 = Line(a, b)
l2 = Line(Point(1, -1), Point(1, 1))
intersect_lines(l1, l2)             # Point(1, 0), or None for parallel lines

ec.intersect(l1, Circle(Point(0, 0), 2))         # tuple of intersection points
ec.tangents(Point(5, 0), Circle(Point(0, 0), 3)) # tuple of tangent lines
```

Constructions in `geomkit.euclid_constructions` return either a single
object, `None` when there is no result (for example
`line_by_two_points` with coinciding points, or `circle_by_center_and_radius`
with a radius that is not positive), or a tuple when the number of results
varies (`intersect`, `tangents`, `common_tangents`). `intersect` accepts any
pair of lines, segments and circles and keeps only points that lie on the
segments involved. Measurements are `distance`, `length` (of a segment or a
circle), `radius` and `angle`.

Lines, segments and circles also offer `nearest_point`,
`point_to_pos_value` and `pos_value_to_point`, and `transformed(t)` to map
them through a view transformation. `Arc.path()` returns the drawing path
of an arc: two points for a straight line (when the centre is infinite) or
the four control points of a cubic Bézier curve.

## Hyperbolic geometry

`geomkit.hyper_point.Point`, `geomkit.hyper_line.Line` and
`geomkit.hyper_circle.Circle` (centre and hyperbolic radius) live in the
unit disk. Points convert with `to_poincare()` / `Point.from_poincare(p)`;
lines and circles give their Poincaré image with `to_poincare()` (a
Euclidean `Arc` or `Circle`).

```python
from geomkit.hyper_point import Point, midpoint
from geomkit.hyper_line import Line, dist, perp
from geomkit import hyper_constructions as hc

p, q = Point(0.0, 0.0), Point(0.5, 0.0)
dist(p, q)                 # hyperbolic distance
midpoint(p, q)
line = Line(Point(-0.5, 0.3), Point(0.5, 0.3))
hc.perpendicular(p, line)
hc.hyperparallel(p, line)
hc.horoparallel(p, line)   # the two lines meeting `line` on the boundary circle
hc.circle_by_center_and_radius(p, 1.0)
```

`hc.intersect` takes any pair of lines and circles and returns a tuple of
points inside the disk. Operations that have no answer for the given input,
such as `Circle.from_three_points` on points that determine no circle,
raise `ValueError`.

## Views and saved state

`geomkit.euclid_transform.Transformation` pans and zooms the plane;
`geomkit.hyper_transform.Transformation` moves and rotates the disk by a
Möbius map of the Poincaré disk (its `zoom` rotates). Both have `scroll`,
`move`, `zoom`, `clear`, `transform` and `untransform`, and save and restore
their state with `to_json()` / `from_json(data)`. Points do the same.
Missing keys or non-numeric values raise `geomkit.jsonio.ParseError`.

Each model has a `Geometry` class (`geomkit.euclid_geometry`,
`geomkit.hyper_geometry`) that holds a transformation, has a display
`name`, makes points with `make_point(x, y)` and names object kinds with
`type_name(kind)`, using the `ObjectKind` flags. The hyperbolic
`make_point` takes Poincaré disk coordinates and pulls points at radius
0.99 or more back to radius 0.99.

## What it does not do

geomkit is a library only. It has no drawing or painting, no window or
interactive editor, no command-line program, and no file storage beyond the
dictionaries that `to_json` returns and `from_json` reads.