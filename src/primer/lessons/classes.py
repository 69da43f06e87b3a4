"""Classes and Objects.

A class bundles data (attributes) with behaviour (methods). ``__init__``
sets up a new instance, ``self`` is the instance a method was called on, and
a subclass inherits everything from its parent and overrides what differs.
"""

from __future__ import annotations

import math

from primer.core.context import LessonContext
from primer.registry import Topic, register_lesson


class Person:
    species = "Homo sapiens"

    def __init__(self, name: str, age: int):
        self.name = name
        self.age = age

    def greet(self) -> str:
        return f"Hello, my name is {self.name} and I am {self.age} years old."

    def birthday(self) -> None:
        self.age += 1

    def __str__(self) -> str:
        return f"{self.name} ({self.age})"

    def __repr__(self) -> str:
        return f"Person(name={self.name!r}, age={self.age!r})"


class Student(Person):
    def __init__(self, name: str, age: int, school: str):
        super().__init__(name, age)
        self.school = school

    def greet(self) -> str:
        return f"{super().greet()} I study at {self.school}."


class Temperature:
    """Celsius temperature with a validated setter and a derived Fahrenheit view."""

    def __init__(self, celsius: float = 0.0):
        self.celsius = celsius

    @property
    def celsius(self) -> float:
        return self._celsius

    @celsius.setter
    def celsius(self, value: float) -> None:
        if value < -273.15:
            raise ValueError("Temperature below absolute zero is not possible")
        self._celsius = value

    @property
    def fahrenheit(self) -> float:
        return self._celsius * 9 / 5 + 32


class Circle:
    def __init__(self, radius: float):
        self.radius = radius

    @classmethod
    def from_diameter(cls, diameter: float) -> Circle:
        return cls(diameter / 2)

    @staticmethod
    def is_valid_radius(value: float) -> bool:
        return value > 0

    def area(self) -> float:
        return math.pi * self.radius**2


@register_lesson(Topic.CLASSES, "person", expected=[
    "Hello, my name is Alice and I am 30 years old.",
    "31",
])
def demo_person(ctx: LessonContext) -> None:
    """A class bundles data with the functions that use it."""
    alice = Person("Alice", 30)
    print(alice.greet())
    alice.birthday()
    print(alice.age)


@register_lesson(Topic.CLASSES, "class_vs_instance_attributes", expected=[
    "Homo sapiens Homo sapiens",
    "Homo sapiens | H. sapiens sapiens",
    "{'name': 'Alice', 'age': 30}",
])
def demo_class_vs_instance_attributes(ctx: LessonContext) -> None:
    """Class attributes are shared; assigning on an instance shadows them."""
    a = Person("Alice", 30)
    b = Person("Bob", 25)
    print(a.species, b.species)

    b.species = "H. sapiens sapiens"
    print(Person.species, "|", b.species)
    print(vars(a))


@register_lesson(Topic.CLASSES, "inheritance", expected=[
    "Hello, my name is Bob and I am 20 years old. I study at MIT.",
    "True True",
    "['Student', 'Person', 'object']",
])
def demo_inheritance(ctx: LessonContext) -> None:
    """A subclass extends its parent; ``super()`` reaches the parent's version."""
    student = Student("Bob", 20, "MIT")
    print(student.greet())
    print(isinstance(student, Person), issubclass(Student, Person))
    print([cls.__name__ for cls in Student.__mro__])


@register_lesson(Topic.CLASSES, "dunder_methods", expected=[
    "Alice (30)",
    "Person(name='Alice', age=30)",
    "[Person(name='Alice', age=30)]",
])
def demo_dunder_methods(ctx: LessonContext) -> None:
    """``__str__`` is for people, ``__repr__`` is for developers."""
    person = Person("Alice", 30)
    print(person)
    print(repr(person))
    print([person])


@register_lesson(Topic.CLASSES, "properties", expected=[
    "77.0",
    "212.0",
    "Temperature below absolute zero is not possible",
])
def demo_properties(ctx: LessonContext) -> None:
    """``@property`` exposes computed or validated attributes."""
    temp = Temperature(25)
    print(temp.fahrenheit)
    temp.celsius = 100
    print(temp.fahrenheit)
    try:
        temp.celsius = -300
    except ValueError as exc:
        print(exc)


@register_lesson(Topic.CLASSES, "class_and_static_methods", expected=[
    "5.0",
    "78.54",
    "False",
])
def demo_class_and_static_methods(ctx: LessonContext) -> None:
    """``@classmethod`` builds alternative constructors; ``@staticmethod`` is a plain helper."""
    circle = Circle.from_diameter(10)
    print(circle.radius)
    print(round(circle.area(), 2))
    print(Circle.is_valid_radius(-1))
