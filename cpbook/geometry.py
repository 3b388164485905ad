"""Plane geometry with vectors, lines, segments and circles."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterator
from dataclasses import dataclass

EPS = 1e-9


class Intersection(enum.Enum):
    """How two figures meet."""

    INTERSECT = "i"
    TANGENT = "t"
    DISJOINT = "d"
    OVERLAP = "o"
    PARALLEL = "p"
    SAME = "s"


def _clamp(value: float) -> float:
    return max(-1.0, min(1.0, value))


class Vector:
    """A point or direction with any number of components."""

    __slots__ = ("components",)

    def __init__(self, *components: float) -> None:
        self.components = tuple(float(c) for c in components)

    @property
    def x(self) -> float:
        return self.components[0]

    @property
    def y(self) -> float:
        return self.components[1]

    def __iter__(self) -> Iterator[float]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __repr__(self) -> str:
        return f"Vector{self.components!r}"

    def _pairs(self, other: "Vector") -> zip:
        if len(self.components) != len(other.components):
            raise ValueError("vectors have different dimensions")
        return zip(self.components, other.components)

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(a + b for a, b in self._pairs(other)))

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(a - b for a, b in self._pairs(other)))

    def __mul__(self, factor: float) -> "Vector":
        return Vector(*(c * factor for c in self.components))

    __rmul__ = __mul__

    def __truediv__(self, factor: float) -> "Vector":
        return Vector(*(c / factor for c in self.components))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if len(self.components) != len(other.components):
            return False
        return all(abs(a - b) <= EPS for a, b in zip(self.components, other.components))

    __hash__ = None  # type: ignore[assignment]

    def perp(self) -> "Vector":
        """The 2D vector turned a quarter turn counter-clockwise."""
        return Vector(-self.y, self.x)

    def dot(self, other: "Vector") -> float:
        return sum(a * b for a, b in self._pairs(other))

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def unit(self) -> "Vector":
        return self / self.length()

    def angle_between(self, other: "Vector") -> float:
        """Angle in radians between the two vectors, in [0, pi]."""
        return math.acos(_clamp(self.dot(other) / (self.length() * other.length())))

    def polar_angle(self) -> float:
        """Angle from the x axis in [0, 2*pi)."""
        angle = math.atan2(self.y, self.x)
        if angle + EPS < 0:
            angle += 2 * math.pi
        return angle

    def cross(self, other: "Vector") -> float:
        """z component of the 2D cross product."""
        return self.x * other.y - self.y * other.x


@dataclass(frozen=True)
class Line:
    """The points origin + t * direction; as a segment, t runs over [0, 1]."""

    origin: Vector
    direction: Vector

    @classmethod
    def from_points(cls, start: Vector, end: Vector) -> "Line":
        return cls(start, end - start)

    def at(self, t: float) -> Vector:
        return self.origin + self.direction * t

    def _project(self, point: Vector) -> float:
        return self.direction.dot(point - self.origin) / self.direction.dot(self.direction)

    def distance_to_point(self, point: Vector) -> float:
        """Distance from point to the infinite line."""
        offset = point - self.origin
        t = self._project(point)
        return (offset - self.direction * t).length()

    def segment_distance_to_point(self, point: Vector) -> float:
        """Distance from point to the segment."""
        offset = point - self.origin
        t = self._project(point)
        if t + EPS < 0 or t > 1 + EPS:
            return min(offset.length(), (offset - self.direction).length())
        return (offset - self.direction * t).length()

    def overlaps_parallel(self, other: "Line") -> bool:
        """Whether two collinear segments share a stretch of the line."""
        axis = 1 if self.direction.x == 0 else 0
        p = self.origin.components[axis]
        q = self.at(1).components[axis]
        r = other.origin.components[axis]
        s = other.at(1).components[axis]
        if min(r, s) > max(p, q):
            return False
        return not max(r, s) < min(p, q)

    def intersect(self, other: "Line") -> tuple[Intersection, float | None, float | None]:
        """Kind of meeting, with parameters t on self and s on other when they cross."""
        if self.direction.cross(other.direction) == 0:
            if (other.origin - self.origin).cross(other.direction) == 0:
                if self.overlaps_parallel(other):
                    return Intersection.OVERLAP, None, None
                return Intersection.PARALLEL, None, None
            return Intersection.DISJOINT, None, None
        w = self.origin - other.origin
        p = other.direction.perp()
        z = self.direction.perp()
        t = -w.dot(p) / p.dot(self.direction)
        s = w.dot(z) / z.dot(other.direction)
        return Intersection.INTERSECT, t, s

    def line_distance(self, other: "Line") -> float:
        """Distance between two infinite lines."""
        kind, _, _ = self.intersect(other)
        if kind is Intersection.INTERSECT:
            return 0.0
        return self.distance_to_point(other.origin)

    def line_to_segment_distance(self, other: "Line") -> float:
        """Distance between this infinite line and the segment other."""
        kind, _, s = self.intersect(other)
        if kind is Intersection.INTERSECT and s + EPS > 0 and s < 1 + EPS:
            return 0.0
        return min(
            self.distance_to_point(other.origin),
            self.distance_to_point(other.at(1)),
        )

    def segment_distance(self, other: "Line") -> float:
        """Distance between two segments."""
        kind, t, s = self.intersect(other)
        if (
            kind is Intersection.INTERSECT
            and t + EPS > 0
            and t < 1 + EPS
            and s + EPS > 0
            and s < 1 + EPS
        ):
            return 0.0
        return min(
            self.segment_distance_to_point(other.origin),
            self.segment_distance_to_point(other.at(1)),
            other.segment_distance_to_point(self.origin),
            other.segment_distance_to_point(self.at(1)),
        )

    def reflect(self, point: Vector, normal: Vector) -> "Line":
        """The ray leaving point after this ray bounces off a mirror with normal."""
        incoming = point - self.origin
        normal = normal.unit()
        depth = abs(incoming.dot(normal))
        mirrored = point + normal * depth
        target = self.origin + (mirrored - self.origin) * 2
        return Line.from_points(point, target)


@dataclass(frozen=True)
class Circle:
    """A circle in the plane, or a sphere when used with 3D lines."""

    center: Vector
    radius: float

    def at(self, angle: float) -> Vector:
        return Vector(
            self.center.x + self.radius * math.cos(angle),
            self.center.y + self.radius * math.sin(angle),
        )

    def intersect_line(self, line: Line) -> tuple[Intersection, float | None, float | None]:
        """Where a line meets the circle, as angles on the circle."""
        distance = line.distance_to_point(self.center)
        if distance > self.radius + EPS:
            return Intersection.DISJOINT, None, None
        foot = line.at(line._project(self.center)) - self.center
        if foot.length() <= EPS:
            base = line.direction.perp().polar_angle()
        else:
            base = foot.polar_angle()
        if abs(distance - self.radius) <= EPS:
            return Intersection.TANGENT, base, None
        theta = math.pi / 2 - math.asin(_clamp(distance / self.radius))
        return Intersection.INTERSECT, base + theta, base - theta

    def intersect_line_as_sphere(
        self, line: Line
    ) -> tuple[Intersection, float | None, float | None]:
        """Where a line meets the sphere, as parameters on the line."""
        distance = line.distance_to_point(self.center)
        if distance > self.radius + EPS:
            return Intersection.DISJOINT, None, None
        middle = line._project(self.center)
        if abs(distance - self.radius) < EPS:
            return Intersection.TANGENT, middle, None
        half_chord = math.sqrt(self.radius**2 - distance**2) / line.direction.length()
        return Intersection.INTERSECT, middle - half_chord, middle + half_chord

    def intersect_circle(
        self, other: "Circle"
    ) -> tuple[Intersection, float | None, float | None]:
        """Where two circles meet, as angles on this circle."""
        between = other.center - self.center
        d = between.length()
        if d > self.radius + other.radius + EPS:
            return Intersection.DISJOINT, None, None
        if d + other.radius + EPS < self.radius:
            return Intersection.DISJOINT, None, None
        if self.center == other.center and abs(self.radius - other.radius) <= EPS:
            if self.radius == 0:
                return Intersection.TANGENT, 0.0, None
            return Intersection.SAME, None, None
        if (
            abs(d - self.radius - other.radius) <= EPS
            or abs(d + other.radius - self.radius) <= EPS
        ):
            return Intersection.TANGENT, between.polar_angle(), None
        theta = cosine_rule_angle(self.radius, d, other.radius)
        base = between.polar_angle()
        return Intersection.INTERSECT, base - theta, base + theta

    def tangent_lines(self, other: "Circle") -> list[Line]:
        """Common tangents, each from its touching point on the smaller circle.

        A single touching point gives a line of zero length there. Coincident
        circles have infinitely many tangents and raise ValueError.
        """
        if self.radius > other.radius + EPS:
            return other.tangent_lines(self)
        between = other.center - self.center
        d = between.length()
        if abs(d) < EPS and abs(self.radius - other.radius) < EPS:
            raise ValueError("coincident circles have infinitely many common tangents")
        if d + self.radius + EPS < other.radius:
            return []
        base = between.polar_angle()
        if abs(d + self.radius - other.radius) < EPS:
            touch = self.at(base + math.pi)
            return [Line.from_points(touch, touch)]
        angle = math.pi - math.acos((other.radius - self.radius) / d)
        lines = [
            Line.from_points(self.at(base + angle), other.at(base + angle)),
            Line.from_points(self.at(base - angle), other.at(base - angle)),
        ]
        if d + EPS < self.radius + other.radius:
            return lines
        if abs(d - self.radius - other.radius) < EPS:
            touch = self.at(base)
            lines.append(Line.from_points(touch, touch))
            return lines
        angle = math.acos((other.radius + self.radius) / d)
        lines.append(Line.from_points(self.at(base + angle), other.at(base + angle + math.pi)))
        lines.append(Line.from_points(self.at(base - angle), other.at(base - angle + math.pi)))
        return lines


def cosine_rule_angle(a: float, b: float, c: float) -> float:
    """Angle opposite side c in a triangle with sides a, b, c."""
    return math.acos(_clamp((a * a + b * b - c * c) / (2 * a * b)))


def collinear(a: Vector, b: Vector, c: Vector) -> bool:
    """Whether three points lie on one line."""
    ab, ac = b - a, c - a
    return abs(abs(ab.dot(ac)) - ab.length() * ac.length()) <= EPS