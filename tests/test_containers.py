from charcell_renderer import (Canvas, Cell, CollisionContainer, Line, PixelContainer,
                               Rect, VisibilityToggle, draw, rasterize)


def test_pixel_container_collects_points():
    pc = PixelContainer(z_index=3)
    pc.plot((1, 1), 'a')
    pc.append_points([(2, 2), (3, 3)], Cell('b', 'blue'))
    pc.blit(Line((0, 4), (2, 4), '-'))
    assert len(pc) == 6
    assert list(rasterize(pc))[:3] == [(1, 1, Cell('a')), (2, 2, Cell('b', 'blue')),
                                       (3, 3, Cell('b', 'blue'))]

    canvas = Canvas(4, 5, '.')
    draw(canvas, pc)
    assert canvas.render() == ['....', '.a..', '..b.', '...b', '---.']


def test_visibility_toggle():
    rect = Rect((0, 0), (2, 2), '#', z_index=7)
    toggle = VisibilityToggle(rect, visible=False)
    assert toggle.z_index == 7
    assert list(rasterize(toggle)) == []
    toggle.toggle()
    assert len(list(rasterize(toggle))) == 4


def test_collision_container():
    walls = CollisionContainer([Rect((0, 0), (10, 1)), Rect((0, 5), (10, 1))])
    player = Rect((3, 3), (1, 1))
    assert not walls.overlaps(player)
    assert walls.will_overlap(player, (0, 2))
    assert walls.will_overlap(player, (0, -3))
    assert not walls.will_overlap(player, (0, 1))


def test_nested_containers_draw():
    inner = CollisionContainer([Line((0, 0), (3, 0), '=')])
    outer = VisibilityToggle(inner)
    canvas = Canvas(4, 1, '.')
    draw(canvas, outer)
    assert canvas.render() == ['====']
