"""Strategy: swap interchangeable algorithms behind one interface.

Problem:
    A shopping cart must accept credit cards, PayPal and bank transfers. A
    growing ``if``/``elif`` over payment types inside ``checkout`` has to be
    edited, and retested, every time a payment method is added.

Solution:
    Each payment method is a strategy class with a ``pay`` method. The cart
    (the context) holds a reference to one strategy and delegates to it; the
    client picks the strategy at runtime.

Use cases:
    1. Different variants of an algorithm should be switchable at runtime.
    2. Many similar classes differ only in how they execute some behaviour.
    3. Business logic should be isolated from algorithm details.

Pros:
    1. Algorithms can be swapped at runtime.
    2. Implementation details are isolated from the code that uses them.
    3. Composition replaces inheritance.
    4. Open/Closed Principle: new strategies need no changes to the context.

Cons:
    1. Clients must know how the strategies differ to pick one.
    2. With few, rarely changing algorithms the extra classes are overhead.
"""
from abc import ABC, abstractmethod
from typing import Optional


class PaymentStrategy(ABC):
    @abstractmethod
    def pay(self, amount: int) -> None:
        pass


class CreditCardPayment(PaymentStrategy):
    def pay(self, amount: int) -> None:
        print(f"Paid {amount} using Credit Card.")


class PayPalPayment(PaymentStrategy):
    def pay(self, amount: int) -> None:
        print(f"Paid {amount} using PayPal.")


class BankTransferPayment(PaymentStrategy):
    def pay(self, amount: int) -> None:
        print(f"Paid {amount} using Bank Transfer.")


class ShoppingCart:
    def __init__(self) -> None:
        self.payment_strategy: Optional[PaymentStrategy] = None

    def set_payment_strategy(self, payment_strategy: PaymentStrategy) -> None:
        self.payment_strategy = payment_strategy

    def checkout(self, amount: int) -> None:
        if self.payment_strategy is None:
            print("Please select a payment method before checking out.")
        else:
            self.payment_strategy.pay(amount)


def main() -> None:
    """Check out three times with a different payment method each time."""
    cart = ShoppingCart()

    cart.set_payment_strategy(CreditCardPayment())
    cart.checkout(100)

    cart.set_payment_strategy(PayPalPayment())
    cart.checkout(200)

    cart.set_payment_strategy(BankTransferPayment())
    cart.checkout(300)


if __name__ == "__main__":
    main()
