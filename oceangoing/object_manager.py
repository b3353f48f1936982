"""Game object lifecycle, render ordering and pairwise collision dispatch."""

from __future__ import annotations

import abc
import itertools
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, TypeVar

Point = tuple[float, float]
_EPS = 1e-9

T = TypeVar("T")


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def _edges(points: Sequence[Point]) -> Iterable[tuple[Point, Point]]:
    return zip(points, list(points[1:]) + list(points[:1]))


def _project(points: Sequence[Point], axis: Point) -> tuple[float, float]:
    values = [px * axis[0] + py * axis[1] for px, py in points]
    return min(values), max(values)


def _segment_intersection(p1: Point, p2: Point, q1: Point, q2: Point) -> Optional[Point]:
    r = (p2[0] - p1[0], p2[1] - p1[1])
    s = (q2[0] - q1[0], q2[1] - q1[1])
    denom = r[0] * s[1] - r[1] * s[0]
    if abs(denom) < _EPS:
        return None
    qp = (q1[0] - p1[0], q1[1] - p1[1])
    t = (qp[0] * s[1] - qp[1] * s[0]) / denom
    u = (qp[0] * r[1] - qp[1] * r[0]) / denom
    if -_EPS <= t <= 1 + _EPS and -_EPS <= u <= 1 + _EPS:
        return p1[0] + t * r[0], p1[1] + t * r[1]
    return None


def rects_overlap(a: tuple[float, float, float, float], b: tuple[float, float, float, float]) -> bool:
    """Whether two (left, top, right, bottom) rectangles share a positive area."""
    return max(a[0], b[0]) < min(a[2], b[2]) and max(a[1], b[1]) < min(a[3], b[3])


@dataclass(frozen=True)
class ConvexPolygon:
    """A convex polygon given by its corner points in order."""

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        points = tuple((float(x), float(y)) for x, y in self.points)
        if not points:
            raise ValueError("a polygon needs at least one point")
        object.__setattr__(self, "points", points)

    @property
    def center(self) -> Point:
        n = len(self.points)
        return sum(p[0] for p in self.points) / n, sum(p[1] for p in self.points) / n

    def bounding_rect(self) -> tuple[float, float, float, float]:
        xs = [p[0] for p in self.points]
        ys = [p[1] for p in self.points]
        return min(xs), min(ys), max(xs), max(ys)

    def _axes(self) -> Iterable[Point]:
        for a, b in _edges(self.points):
            axis = (a[1] - b[1], b[0] - a[0])
            if axis != (0.0, 0.0):
                yield axis

    def intersects(self, other: ConvexPolygon) -> bool:
        """Separating-axis test; touching polygons do not intersect."""
        for axis in itertools.chain(self._axes(), other._axes()):
            a_min, a_max = _project(self.points, axis)
            b_min, b_max = _project(other.points, axis)
            if a_max <= b_min or b_max <= a_min:
                return False
        return True

    def contains(self, point: Point) -> bool:
        if len(self.points) < 3:
            return False
        signs = set()
        for a, b in _edges(self.points):
            c = _cross(a, b, point)
            if c > _EPS:
                signs.add(1)
            elif c < -_EPS:
                signs.add(-1)
        return len(signs) <= 1

    def contact_points(self, other: ConvexPolygon) -> list[Point]:
        """Corners inside the other polygon and crossings of the two outlines."""
        found: list[Point] = []

        def add(point: Point) -> None:
            if all(abs(point[0] - q[0]) > _EPS or abs(point[1] - q[1]) > _EPS for q in found):
                found.append(point)

        for p in self.points:
            if other.contains(p):
                add(p)
        for p in other.points:
            if self.contains(p):
                add(p)
        for a1, a2 in _edges(self.points):
            for b1, b2 in _edges(other.points):
                hit = _segment_intersection(a1, a2, b1, b2)
                if hit is not None:
                    add(hit)
        return found


class GameObject:
    """Something that lives in the object manager while it is active."""

    def __init__(self, manager: ObjectManager) -> None:
        self.manager = manager
        self.z_index = 0
        self.destroyed = False
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def update(self, delta: float) -> None:
        """Advance by ``delta`` seconds; the base object is static."""

    def set_active(self, state: bool) -> None:
        if self._active == state:
            return
        if state:
            self.manager.register(self)
        else:
            self.manager.remove(self, False)
        self._active = state

    def destroy(self) -> None:
        """Remove for good: at the next update if active, otherwise now."""
        if self._active:
            self.manager.remove(self, True)
        else:
            self.destroyed = True


class Collidable(GameObject, abc.ABC):
    """A game object that takes part in collision detection while active."""

    def __init__(self, manager: ObjectManager, collisions: CollisionHandler) -> None:
        super().__init__(manager)
        self.collisions = collisions
        self.contacts_needed = False

    def on_collision(self, other: Collidable, contacts: list[Point]) -> None:
        """React to touching ``other``; the base object ignores it."""

    @abc.abstractmethod
    def collision_bounds(self) -> ConvexPolygon:
        """Current outline in world coordinates."""

    def set_active(self, state: bool) -> None:
        if self.active != state:
            if state:
                self.collisions.register(self)
            else:
                self.collisions.remove(self)
        super().set_active(state)

    def destroy(self) -> None:
        if self.active:
            self.collisions.remove(self)
        super().destroy()


class ObjectManager:
    """Holds active objects, updates them and defers their removal."""

    def __init__(self) -> None:
        self._objects: dict[GameObject, int] = {}
        self._to_remove: dict[GameObject, bool] = {}
        self._sequence = itertools.count()

    def __contains__(self, obj: object) -> bool:
        return obj in self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def register(self, obj: GameObject) -> None:
        self._to_remove.pop(obj, None)
        if obj not in self._objects:
            self._objects[obj] = next(self._sequence)

    def remove(self, obj: GameObject, delete: bool) -> None:
        """Schedule removal at the next update; the first request wins."""
        if obj in self._objects and obj not in self._to_remove:
            self._to_remove[obj] = delete

    def clear(self) -> None:
        """Destroy every object that is not already leaving."""
        for obj in list(self._objects):
            if obj not in self._to_remove:
                obj.destroy()

    def update_all(self, delta: float) -> None:
        for obj, delete in self._to_remove.items():
            self._objects.pop(obj, None)
            if delete:
                obj.destroyed = True
        self._to_remove.clear()
        for obj in list(self._objects):
            obj.update(delta)

    def render_order(self) -> tuple[list[GameObject], list[GameObject]]:
        """Objects by descending z: the world layer (z >= 0), then the UI layer."""
        ordered = sorted(self._objects, key=lambda o: (-o.z_index, self._objects[o]))
        world = [o for o in ordered if o.z_index >= 0]
        ui = [o for o in ordered if o.z_index < 0]
        return world, ui

    def get_all(self, kind: type[T]) -> list[T]:
        return [o for o in self._objects if isinstance(o, kind)]


class CollisionHandler:
    """Finds touching pairs among registered collidables and notifies them."""

    def __init__(self) -> None:
        self._objects: dict[Collidable, None] = {}

    def __contains__(self, obj: object) -> bool:
        return obj in self._objects

    def register(self, obj: Collidable) -> None:
        self._objects[obj] = None

    def remove(self, obj: Collidable) -> None:
        self._objects.pop(obj, None)

    def handle_collision(self) -> None:
        objs = list(self._objects)
        bounds = [o.collision_bounds() for o in objs]
        rects = [b.bounding_rect() for b in bounds]
        for i, j in itertools.combinations(range(len(objs)), 2):
            if not rects_overlap(rects[i], rects[j]):
                continue
            if not bounds[i].intersects(bounds[j]):
                continue
            contacts: list[Point] = []
            if objs[i].contacts_needed or objs[j].contacts_needed:
                contacts = bounds[i].contact_points(bounds[j])
            objs[i].on_collision(objs[j], contacts)
            objs[j].on_collision(objs[i], contacts)