import pytest

from oceangoing.object_manager import (
    Collidable,
    CollisionHandler,
    ConvexPolygon,
    GameObject,
    ObjectManager,
)


class _Thing(GameObject):
    def __init__(self, manager, z=0):
        super().__init__(manager)
        self.z_index = z
        self.deltas = []

    def update(self, delta):
        self.deltas.append(delta)


class _Other(_Thing):
    pass


class _Box(Collidable):
    def __init__(self, manager, collisions, x, y, size=2.0):
        super().__init__(manager, collisions)
        self.x, self.y, self.size = x, y, size
        self.hits = []

    def collision_bounds(self):
        s = self.size
        x, y = self.x, self.y
        return ConvexPolygon(((x, y), (x + s, y), (x + s, y + s), (x, y + s)))

    def on_collision(self, other, contacts):
        self.hits.append((other, list(contacts)))


@pytest.fixture
def manager():
    return ObjectManager()


@pytest.fixture
def collisions():
    return CollisionHandler()


def test_activation_registers(manager):
    thing = _Thing(manager)
    thing.set_active(True)
    assert thing in manager
    assert thing.active


def test_deactivation_is_deferred(manager):
    thing = _Thing(manager)
    thing.set_active(True)
    thing.set_active(False)
    assert thing in manager
    manager.update_all(0.1)
    assert thing not in manager
    assert not thing.destroyed


def test_destroy_active_object(manager):
    thing = _Thing(manager)
    thing.set_active(True)
    thing.destroy()
    assert not thing.destroyed
    manager.update_all(0.1)
    assert thing.destroyed
    assert thing not in manager


def test_destroy_inactive_object_is_immediate(manager):
    thing = _Thing(manager)
    thing.destroy()
    assert thing.destroyed


def test_first_removal_request_wins(manager):
    thing = _Thing(manager)
    thing.set_active(True)
    manager.remove(thing, False)
    manager.remove(thing, True)
    manager.update_all(0.0)
    assert not thing.destroyed


def test_update_all_passes_delta(manager):
    things = [_Thing(manager) for _ in range(3)]
    for t in things:
        t.set_active(True)
    manager.update_all(0.25)
    assert all(t.deltas == [0.25] for t in things)


def test_clear_destroys_everything(manager):
    things = [_Thing(manager) for _ in range(3)]
    for t in things:
        t.set_active(True)
    manager.clear()
    manager.update_all(0.0)
    assert len(manager) == 0
    assert all(t.destroyed for t in things)


def test_render_order(manager):
    low = _Thing(manager, 10)
    high = _Thing(manager, 500)
    ui = _Thing(manager, -5)
    ui_top = _Thing(manager, -1)
    same = _Thing(manager, 10)
    for t in (low, high, ui, ui_top, same):
        t.set_active(True)
    world, layer = manager.render_order()
    assert world == [high, low, same]
    assert layer == [ui_top, ui]


def test_get_all_filters_by_kind(manager):
    a = _Thing(manager)
    b = _Other(manager)
    a.set_active(True)
    b.set_active(True)
    assert manager.get_all(_Other) == [b]
    assert set(manager.get_all(_Thing)) == {a, b}


def test_collidable_registers_with_handler(manager, collisions):
    box = _Box(manager, collisions, 0, 0)
    box.set_active(True)
    assert box in collisions
    box.destroy()
    assert box not in collisions


def test_overlapping_boxes_collide(manager, collisions):
    a = _Box(manager, collisions, 0, 0)
    b = _Box(manager, collisions, 1, 1)
    c = _Box(manager, collisions, 10, 10)
    for box in (a, b, c):
        box.set_active(True)
    collisions.handle_collision()
    assert [h[0] for h in a.hits] == [b]
    assert [h[0] for h in b.hits] == [a]
    assert c.hits == []
    assert a.hits[0][1] == []


def test_touching_boxes_do_not_collide(manager, collisions):
    a = _Box(manager, collisions, 0, 0)
    b = _Box(manager, collisions, 2, 0)
    a.set_active(True)
    b.set_active(True)
    collisions.handle_collision()
    assert a.hits == [] and b.hits == []


def test_contacts_computed_when_needed(manager, collisions):
    a = _Box(manager, collisions, 0, 0)
    b = _Box(manager, collisions, 1, 1)
    a.contacts_needed = True
    a.set_active(True)
    b.set_active(True)
    collisions.handle_collision()
    contacts = a.hits[0][1]
    assert contacts == b.hits[0][1]
    assert (1.0, 1.0) in contacts and (2.0, 2.0) in contacts
    assert all(1.0 <= x <= 2.0 and 1.0 <= y <= 2.0 for x, y in contacts)


def test_polygon_intersection_is_symmetric():
    tri = ConvexPolygon(((0, 0), (4, 0), (0, 4)))
    square = ConvexPolygon(((3, 3), (5, 3), (5, 5), (3, 5)))
    inner = ConvexPolygon(((1, 1), (2, 1), (2, 2), (1, 2)))
    assert not tri.intersects(square) and not square.intersects(tri)
    assert tri.intersects(inner) and inner.intersects(tri)


def test_polygon_bounding_rect_and_center():
    poly = ConvexPolygon(((0, 0), (4, 0), (4, 2), (0, 2)))
    assert poly.bounding_rect() == (0.0, 0.0, 4.0, 2.0)
    assert poly.center == (2.0, 1.0)


def test_empty_polygon_rejected():
    with pytest.raises(ValueError):
        ConvexPolygon(())