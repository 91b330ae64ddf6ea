import math

from pattern_catalog.creational.prototype import Circle, Rectangle, clone_and_compare, main


def test_main_reports_every_clone_as_distinct_and_identical(capsys):
    main()

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        line
        for i in range(4)
        for line in (
            f"{i}: Shapes are different objects (yay!)",
            f"{i}: And they are identical (yay!)",
        )
    ]


def test_clone_is_a_different_but_equal_object():
    rectangle = Rectangle(x=20, y=20, color="Blue", length=15, breadth=25)

    copy = rectangle.clone()

    assert copy is not rectangle
    assert copy == rectangle
    assert type(copy) is Rectangle


def test_clone_is_independent_of_original():
    circle = Circle(x=10, y=10, color="Red", radius=10)

    copy = circle.clone()
    copy.radius = 20

    assert circle.radius == 10
    assert circle != copy


def test_shapes_of_different_type_are_not_equal():
    assert Circle(x=1, y=1, color="Red") != Rectangle(x=1, y=1, color="Red")


def test_string_forms():
    assert str(Rectangle(x=20, y=20, color="Blue", length=15, breadth=25)) == (
        "Rectangle: [length = 15, breadth = 25, x = 20, y = 20, color = Blue]"
    )
    assert str(Circle(x=10, y=10, color="Red", radius=10)) == (
        "Circle: [radius = 10, x = 10, y = 10, color = Red]"
    )


def test_clone_and_compare_flags_shared_objects(capsys):
    class SharedCircle(Circle):
        def clone(self):
            return self

    clone_and_compare([SharedCircle(radius=1)])

    assert capsys.readouterr().out.splitlines() == ["0: Shape objects are the same (booo!)"]


def test_area_is_defined_per_shape():
    assert Rectangle(length=2, breadth=3).area() == 6.0
    assert Circle(radius=2).area() == math.pi * 4
