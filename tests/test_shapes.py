from qrcodegen.shapes import (draw_centered_square, draw_rounded_square, draw_square,
                              draw_triangle)

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def painted(image):
    return sum(1 for px in image.getdata() if px == WHITE)


def test_square_fills_exact_cell(canvas):
    draw_square(canvas, 4, 4, 8, 8, WHITE)
    assert canvas.getpixel((4, 4)) == WHITE
    assert canvas.getpixel((11, 11)) == WHITE
    assert canvas.getpixel((3, 4)) == BLACK
    assert canvas.getpixel((12, 11)) == BLACK
    assert painted(canvas) == 64


def test_rounded_square_cuts_corners(canvas):
    draw_rounded_square(canvas, 0, 0, 8, 8, WHITE, radius=3)
    for corner in [(0, 0), (7, 0), (0, 7), (7, 7), (0, 1), (1, 0), (7, 6)]:
        assert canvas.getpixel(corner) == BLACK
    for inside in [(1, 1), (6, 6), (6, 1), (1, 6), (0, 3), (3, 0), (4, 4)]:
        assert canvas.getpixel(inside) == WHITE
    # each 3x3 corner keeps 4 of its 9 pixels
    assert painted(canvas) == 64 - 4 * 5


def test_rounded_square_is_symmetric(canvas):
    draw_rounded_square(canvas, 0, 0, 16, 16, WHITE, radius=6)
    for y in range(16):
        for x in range(16):
            assert canvas.getpixel((x, y)) == canvas.getpixel((15 - x, y))
            assert canvas.getpixel((x, y)) == canvas.getpixel((x, 15 - y))


def test_rounded_square_without_radius_is_a_square(canvas):
    draw_rounded_square(canvas, 0, 0, 8, 8, WHITE, radius=0)
    assert painted(canvas) == 64


def test_triangle_points_up(canvas):
    draw_triangle(canvas, 0, 0, 8, 8, WHITE)
    # apex row is empty, the span widens towards the base
    assert all(canvas.getpixel((x, 0)) == BLACK for x in range(8))
    assert canvas.getpixel((3, 2)) == WHITE
    assert canvas.getpixel((4, 2)) == WHITE
    assert canvas.getpixel((2, 2)) == BLACK
    assert canvas.getpixel((2, 4)) == WHITE
    assert canvas.getpixel((1, 4)) == BLACK
    assert canvas.getpixel((1, 7)) == WHITE
    assert canvas.getpixel((6, 7)) == WHITE
    assert canvas.getpixel((0, 7)) == BLACK
    assert canvas.getpixel((7, 7)) == BLACK


def test_triangle_rows_never_shrink(canvas):
    draw_triangle(canvas, 0, 0, 16, 16, WHITE)
    widths = [sum(1 for x in range(16) if canvas.getpixel((x, y)) == WHITE)
              for y in range(16)]
    assert widths == sorted(widths)
    assert widths[-1] > widths[0]


def test_centered_square_bleeds_into_neighbours(canvas):
    draw_centered_square(canvas, 8, 0, 8, 10, WHITE)
    assert canvas.getpixel((7, 0)) == WHITE
    assert canvas.getpixel((15, 8)) == WHITE
    assert canvas.getpixel((6, 0)) == BLACK
    assert canvas.getpixel((8, 9)) == BLACK


def test_painters_clip_at_image_edges(canvas):
    draw_centered_square(canvas, 0, 0, 8, 10, WHITE)
    draw_rounded_square(canvas, 12, 12, 8, 8, WHITE, radius=3)
    draw_triangle(canvas, 12, -4, 8, 8, WHITE)
    assert canvas.size == (16, 16)
    assert canvas.getpixel((0, 0)) == WHITE
    assert canvas.getpixel((8, 8)) == WHITE
    assert canvas.getpixel((9, 9)) == BLACK
    assert canvas.getpixel((15, 15)) == WHITE
