from .bounded import NonNegative


class ConstantFoodSource:
    """Adds the same amount of food every step."""

    def __init__(self, food_per_step: float):
        self.food_per_step = NonNegative(food_per_step)

    def food_this_step(self) -> NonNegative:
        return self.food_per_step


class GrowingFoodSource:
    """Adds initial, initial + increment, initial + 2 * increment, ...

    The amount advances on every call whether or not the food gets eaten.
    """

    def __init__(self, initial: float, increment: float):
        self.next_amount = NonNegative(initial)
        self.increment = NonNegative(increment)

    def food_this_step(self) -> NonNegative:
        amount = self.next_amount
        self.next_amount = amount + self.increment
        return amount
