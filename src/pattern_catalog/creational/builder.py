"""Builder: construct complex objects step by step.

Problem:
    Cars come with different sets of features: one has GPS and a sunroof,
    another has neither. Modelling every combination with its own subclass or
    constructor overload explodes quickly, and a single giant constructor
    ends up called with mostly unused arguments.

Solution:
    Move construction out of the product into a separate builder object with
    one method per step (set the model, add a sunroof, add GPS). Only the
    steps a particular car needs are called, and ``build()`` returns the
    finished car as an immutable snapshot.

    An optional director captures recurring construction routines (a luxury
    car, an economy car) so they can be reused. Clients may also drive the
    builder directly.

Pros:
    1. Far fewer constructors to maintain.
    2. The product can be immutable once built.
    3. Complex objects are easy to assemble.

Cons:
    1. Changing a built product means building a new one.
    2. Extra classes: the builder and the director.
    3. The director is coupled to the builder it drives.
    4. More classes to test.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


def _yes_no(value: bool) -> str:
    return "true" if value else "false"


class Car(BaseModel):
    """Immutable car produced by :class:`CarBuilder`."""
    model_config = ConfigDict(frozen=True)

    model: Optional[str] = None
    color: str
    sun_roof: bool = False
    gps: bool = False

    def __str__(self) -> str:
        return (
            f"Model: {self.model} Color: {self.color} "
            f"Has sunroof: {_yes_no(self.sun_roof)} Has gps: {_yes_no(self.gps)}"
        )


class CarBuilder:
    """Accumulates car features through chained setters."""

    def __init__(self, color: str):
        self._color = color
        self._model: Optional[str] = None
        self._sun_roof = False
        self._gps = False

    def set_sunroof(self, sun_roof: bool) -> "CarBuilder":
        self._sun_roof = sun_roof
        return self

    def set_gps(self, gps: bool) -> "CarBuilder":
        self._gps = gps
        return self

    def set_model(self, model: str) -> "CarBuilder":
        self._model = model
        return self

    def build(self) -> Car:
        """Return a snapshot of the current settings."""
        return Car(model=self._model, color=self._color, sun_roof=self._sun_roof, gps=self._gps)


class VehicleBuildingDirector:
    """Predefined construction routines for :class:`CarBuilder`."""

    def __init__(self, builder: CarBuilder):
        self.builder = builder

    def build_blue_luxury_car(self) -> Car:
        # every feature
        return self.builder.set_model("Lexus").set_sunroof(True).set_gps(True).build()

    def build_blue_economy_car(self) -> Car:
        return self.builder.set_model("Lexus").build()


# ---------- Step-wise builder interface ----------

class CarType(str, Enum):
    CITY_CAR = "CITY_CAR"
    SPORTS_CAR = "SPORTS_CAR"
    SUV = "SUV"


class Transmission(str, Enum):
    SINGLE_SPEED = "SINGLE_SPEED"
    MANUAL = "MANUAL"
    AUTOMATIC = "AUTOMATIC"
    SEMI_AUTOMATIC = "SEMI_AUTOMATIC"


class Engine(BaseModel):
    model_config = ConfigDict(frozen=True)

    volume: float
    mileage: float = 0.0


class TripComputer(BaseModel):
    model_config = ConfigDict(frozen=True)

    fuel_level_shown: bool = True


class GPSNavigator(BaseModel):
    model_config = ConfigDict(frozen=True)

    route: str = "221b, Baker Street, London to Scotland Yard, 8-10 Broadway, London"


class CarSpecification(BaseModel):
    """Immutable result of :class:`SpecificationBuilder`."""
    model_config = ConfigDict(frozen=True)

    car_type: CarType
    seats: int
    engine: Engine
    transmission: Transmission
    trip_computer: Optional[TripComputer] = None
    gps_navigator: Optional[GPSNavigator] = None

    def describe(self) -> str:
        parts = [
            f"Type of car: {self.car_type.value}",
            f"Count of seats: {self.seats}",
            f"Engine: volume - {self.engine.volume}; mileage - {self.engine.mileage}",
            f"Transmission: {self.transmission.value}",
            "Trip Computer: Functional" if self.trip_computer else "Trip Computer: N/A",
            "GPS Navigator: Functional" if self.gps_navigator else "GPS Navigator: N/A",
        ]
        return "\n".join(parts)


class Builder(ABC):
    """Every construction step a car builder supports."""

    @abstractmethod
    def set_car_type(self, car_type: CarType) -> None:
        pass

    @abstractmethod
    def set_seats(self, seats: int) -> None:
        pass

    @abstractmethod
    def set_engine(self, engine: Engine) -> None:
        pass

    @abstractmethod
    def set_transmission(self, transmission: Transmission) -> None:
        pass

    @abstractmethod
    def set_trip_computer(self, trip_computer: TripComputer) -> None:
        pass

    @abstractmethod
    def set_gps_navigator(self, gps_navigator: GPSNavigator) -> None:
        pass


class SpecificationBuilder(Builder):
    """Builds :class:`CarSpecification` objects."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._car_type: Optional[CarType] = None
        self._seats = 0
        self._engine: Optional[Engine] = None
        self._transmission: Optional[Transmission] = None
        self._trip_computer: Optional[TripComputer] = None
        self._gps_navigator: Optional[GPSNavigator] = None

    def set_car_type(self, car_type: CarType) -> None:
        self._car_type = car_type

    def set_seats(self, seats: int) -> None:
        self._seats = seats

    def set_engine(self, engine: Engine) -> None:
        self._engine = engine

    def set_transmission(self, transmission: Transmission) -> None:
        self._transmission = transmission

    def set_trip_computer(self, trip_computer: TripComputer) -> None:
        self._trip_computer = trip_computer

    def set_gps_navigator(self, gps_navigator: GPSNavigator) -> None:
        self._gps_navigator = gps_navigator

    def get_result(self) -> CarSpecification:
        """
        Return the specification built so far.

        Raises:
            pydantic.ValidationError: If a mandatory step was skipped
        """
        return CarSpecification(
            car_type=self._car_type,
            seats=self._seats,
            engine=self._engine,
            transmission=self._transmission,
            trip_computer=self._trip_computer,
            gps_navigator=self._gps_navigator,
        )


class Director:
    """Knows the step order for each kind of car."""

    def construct_sports_car(self, builder: Builder) -> None:
        builder.set_car_type(CarType.SPORTS_CAR)
        builder.set_seats(2)
        builder.set_engine(Engine(volume=3.0))
        builder.set_transmission(Transmission.SEMI_AUTOMATIC)
        builder.set_trip_computer(TripComputer())
        builder.set_gps_navigator(GPSNavigator())

    def construct_city_car(self, builder: Builder) -> None:
        builder.set_car_type(CarType.CITY_CAR)
        builder.set_seats(2)
        builder.set_engine(Engine(volume=1.2))
        builder.set_transmission(Transmission.AUTOMATIC)
        builder.set_trip_computer(TripComputer())
        builder.set_gps_navigator(GPSNavigator())

    def construct_suv(self, builder: Builder) -> None:
        builder.set_car_type(CarType.SUV)
        builder.set_seats(4)
        builder.set_engine(Engine(volume=2.5))
        builder.set_transmission(Transmission.MANUAL)
        builder.set_gps_navigator(GPSNavigator())


def main() -> None:
    """Build a luxury and an economy car, then a sports car specification."""
    luxury_director = VehicleBuildingDirector(CarBuilder("Blue"))
    luxury_car = luxury_director.build_blue_luxury_car()
    print(f"Luxury car: {luxury_car}")

    economy_director = VehicleBuildingDirector(CarBuilder("Blue"))
    economy_car = economy_director.build_blue_economy_car()
    print(f"Economy car: {economy_car}")

    builder = SpecificationBuilder()
    Director().construct_sports_car(builder)
    specification = builder.get_result()
    print(f"Car built: {specification.car_type.value}")
    print(specification.describe())


if __name__ == "__main__":
    main()
