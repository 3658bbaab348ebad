from abc import ABC, abstractmethod
import math


# Report totals depend on this exact value, not math.pi.
PI = 3.14159


class Shape(ABC):
    name = "Shape"
    is_polygon = False
    side_count = 0

    @abstractmethod
    def area(self) -> float:
        pass

    @abstractmethod
    def perimeter(self) -> float:
        pass

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{self.name} area={self.area():g} perimeter={self.perimeter():g}>"


class Polygon(Shape):
    is_polygon = True


class Circle(Shape):
    name = "Circle"

    def __init__(self, radius: float):
        self.radius = radius

    def area(self) -> float:
        return PI * self.radius * self.radius

    def perimeter(self) -> float:
        return 2 * PI * self.radius


class Rectangle(Polygon):
    name = "Rectangle"
    side_count = 4

    def __init__(self, length: float, width: float):
        self.length = length
        self.width = width

    def area(self) -> float:
        return self.length * self.width

    def perimeter(self) -> float:
        return 2 * (self.length + self.width)


class Square(Rectangle):
    name = "Square"

    def __init__(self, side: float):
        super().__init__(side, side)

    @property
    def side(self) -> float:
        return self.length


class Triangle(Polygon):
    name = "Triangle"
    side_count = 3

    def __init__(self, side_a: float, side_b: float, side_c: float):
        self.sides = (side_a, side_b, side_c)

    def area(self) -> float:
        """Heron's formula, expanded.

        Sides that break the triangle inequality give a negative product and
        the area comes back as ``nan`` instead of raising.
        """
        a, b, c = self.sides
        product = (a + b + c) * (-a + b + c) * (a - b + c) * (a + b - c)
        if product < 0:
            return math.nan
        return 0.25 * math.sqrt(product)

    def perimeter(self) -> float:
        return sum(self.sides)
