from pattern_catalog.behavioral.strategy import (
    BankTransferPayment,
    CreditCardPayment,
    PayPalPayment,
    ShoppingCart,
    main,
)


def test_main_output(capsys):
    main()

    assert capsys.readouterr().out.splitlines() == [
        "Paid 100 using Credit Card.",
        "Paid 200 using PayPal.",
        "Paid 300 using Bank Transfer.",
    ]


def test_checkout_without_strategy(capsys):
    ShoppingCart().checkout(50)

    assert capsys.readouterr().out == "Please select a payment method before checking out.\n"


def test_strategy_can_be_swapped(capsys):
    cart = ShoppingCart()
    cart.set_payment_strategy(BankTransferPayment())
    cart.set_payment_strategy(PayPalPayment())

    cart.checkout(10)

    assert capsys.readouterr().out == "Paid 10 using PayPal.\n"


def test_each_strategy_reports_its_method(capsys):
    cart = ShoppingCart()
    for strategy in (CreditCardPayment(), PayPalPayment(), BankTransferPayment()):
        cart.set_payment_strategy(strategy)
        cart.checkout(1)

    assert capsys.readouterr().out.splitlines() == [
        "Paid 1 using Credit Card.",
        "Paid 1 using PayPal.",
        "Paid 1 using Bank Transfer.",
    ]
