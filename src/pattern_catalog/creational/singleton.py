"""Singleton: keep exactly one instance of a class and give global access to it.

How:
    The instance is stored once and handed out by an accessor; the first
    request creates it and every later request returns the same object.
    Here the storage and the creation lock live in the shared
    ``SingletonRegistry``, and ``Product.get_instance`` is the accessor.

Why:
    1. Global access to one instance that cannot be overwritten.
    2. A single instance avoids conflicts between copies.
    3. Useful for shared resources such as a database connection.

Use cases:
    1. A class should have just one instance available to all clients, for
       example a database object shared by different parts of the program.
    2. Stricter control over global variables is needed.

Pros:
    1. Lazy initialization: the instance is created when first needed.
    2. Controlled access to shared state.
    3. Less raw global state.

Cons:
    1. Harder to test.
    2. Violates the Single Responsibility Principle: it both limits the
       instance count and provides global access.
    3. Subclassing is awkward.
    4. Needs special care with threads so that two threads do not create two
       instances. The registry guards first creation with a lock and a double
       check, which the demo exercises from a thread pool.
"""
from concurrent.futures import ThreadPoolExecutor

from pattern_catalog.infrastructure.patterns.singleton_access import get_singleton, reset_singleton
from pattern_catalog.infrastructure.patterns.singleton_registry import SingletonRegistry


class Product:
    """A product of which only one instance may exist."""

    def __init__(self, product_name: str):
        self.product_name = product_name

    @classmethod
    def get_instance(cls, product_name: str) -> "Product":
        """Return the single instance, creating it with ``product_name`` on first use."""
        return get_singleton(cls, product_name)

    @classmethod
    def reset_instance(cls) -> None:
        reset_singleton(cls)


def count_instances_under_contention(workers: int = 8) -> int:
    """Request a product from several threads at once and count distinct objects.

    Uses a private registry so the process-wide ``Product`` is left untouched.
    """
    registry = SingletonRegistry()
    with ThreadPoolExecutor(max_workers=workers) as pool:
        instances = list(pool.map(lambda i: registry.get(Product, f"Item-{i}"), range(workers * 4)))
    return len({id(instance) for instance in instances})


def main() -> None:
    """Ask for two products; only the first name sticks."""
    # Demo runs are repeatable within one process.
    Product.reset_instance()

    product1 = Product.get_instance("Mobile")
    product2 = Product.get_instance("TV")

    print(f"product1: {product1.product_name}")
    print(f"product2: {product2.product_name}")
    print(f"Distinct instances after concurrent access: {count_instances_under_contention()}")


if __name__ == "__main__":
    main()
