"""Tests for the creational patterns."""

import threading

import pytest

from pattern_catalog.domain.base.exceptions import UnsupportedProductError, ValidationError
from pattern_catalog.patterns.creational import (
    abstract_factory,
    builder,
    factory_method,
    prototype,
    singleton,
)


class TestSingleton:
    """Test singleton identity."""

    def test_get_instance_returns_same_object(self):
        assert singleton.Singleton.get_instance() is singleton.Singleton.get_instance()

    def test_constructor_returns_shared_instance(self):
        assert singleton.Singleton() is singleton.Singleton.get_instance()

    def test_concurrent_first_access_creates_one_instance(self, monkeypatch):
        monkeypatch.setattr(singleton.Singleton, "_instance", None)
        instances = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            instances.append(singleton.Singleton.get_instance())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(instances) == 8
        assert len({id(instance) for instance in instances}) == 1

    def test_demo(self, narration):
        assert narration(singleton.demo) == ["Are instances the same? True"]


class TestFactoryMethod:
    """Test factory method creators and lookup."""

    def test_creators_produce_their_products(self):
        assert isinstance(factory_method.ConcreteCreatorA().factory_method(),
                          factory_method.ConcreteProductA)
        assert isinstance(factory_method.ConcreteCreatorB().factory_method(),
                          factory_method.ConcreteProductB)

    def test_some_operation_wraps_product_result(self):
        assert factory_method.ConcreteCreatorB().some_operation() == \
            "Creator: Result of ConcreteProductB"

    @pytest.mark.parametrize("kind, expected", [
        ("A", factory_method.ConcreteCreatorA),
        ("b", factory_method.ConcreteCreatorB),
        ("  a ", factory_method.ConcreteCreatorA),
    ])
    def test_create_creator_lookup(self, kind, expected):
        assert isinstance(factory_method.create_creator(kind), expected)

    def test_create_creator_rejects_unknown_kind(self):
        with pytest.raises(UnsupportedProductError) as exc_info:
            factory_method.create_creator("C")

        assert exc_info.value.kind == "C"
        assert exc_info.value.supported == ["A", "B"]
        assert "Unsupported product kind 'C'" in str(exc_info.value)
        assert isinstance(exc_info.value, ValidationError)

    def test_creator_is_abstract(self):
        with pytest.raises(TypeError):
            factory_method.Creator()

    def test_demo(self, narration):
        assert narration(factory_method.demo) == [
            "App: Launched with ConcreteCreatorA.",
            "Creator: Result of ConcreteProductA",
            "",
            "App: Launched with ConcreteCreatorB.",
            "Creator: Result of ConcreteProductB",
        ]


class TestAbstractFactory:
    """Test product families."""

    def test_factory1_builds_family_1(self):
        factory = abstract_factory.ConcreteFactory1()
        product_a = factory.create_product_a()
        product_b = factory.create_product_b()

        assert product_a.useful_function_a() == "Product A1"
        assert product_b.useful_function_b() == "Product B1"
        assert product_b.another_useful_function_b(product_a) == \
            "Product B1 collaborating with (Product A1)"

    def test_factory2_builds_family_2(self):
        factory = abstract_factory.ConcreteFactory2()
        product_b = factory.create_product_b()

        assert product_b.useful_function_b() == "Product B2"
        assert product_b.another_useful_function_b(factory.create_product_a()) == \
            "Product B2 collaborating with (Product A2)"

    def test_get_factory(self):
        assert isinstance(abstract_factory.get_factory("2"), abstract_factory.ConcreteFactory2)

    def test_get_factory_rejects_unknown_family(self):
        with pytest.raises(UnsupportedProductError, match="Unsupported product kind '3'"):
            abstract_factory.get_factory("3")

    def test_demo(self, narration):
        assert narration(abstract_factory.demo) == [
            "Client: Testing client code with ConcreteFactory1",
            "Product A1",
            "",
            "Client: Testing the same client code with ConcreteFactory2",
            "Product A2",
        ]


class TestBuilder:
    """Test builder and director."""

    def setup_method(self):
        """Set up test fixtures."""
        self.builder = builder.ConcreteBuilder()
        self.director = builder.Director(self.builder)

    def test_minimal_product(self):
        self.director.build_minimal_product()
        assert self.builder.get_product().parts == ["PartA"]

    def test_full_product(self):
        self.director.build_full_product()
        product = self.builder.get_product()

        assert product.parts == ["PartA", "PartB", "PartC"]
        assert product.list_parts() == "Product parts: PartA, PartB, PartC"

    def test_get_product_resets_builder(self):
        self.director.build_full_product()
        first = self.builder.get_product()
        second = self.builder.get_product()

        assert first is not second
        assert second.parts == []

    def test_builder_can_be_built_without_director(self):
        self.builder.build_part_c()
        self.builder.build_part_a()
        assert self.builder.get_product().parts == ["PartC", "PartA"]

    def test_parts_view_is_a_copy(self):
        product = builder.Product()
        product.add("PartA")
        product.parts.append("PartZ")
        assert product.parts == ["PartA"]

    def test_director_builder_can_be_replaced(self):
        other = builder.ConcreteBuilder()
        self.director.builder = other
        self.director.build_minimal_product()

        assert other.get_product().parts == ["PartA"]
        assert self.builder.get_product().parts == []

    def test_demo(self, narration):
        assert narration(builder.demo) == [
            "Client: Building minimal product",
            "",
            "Client: Building full product",
        ]


class TestPrototype:
    """Test prototype cloning."""

    @pytest.mark.parametrize("cls", [prototype.ConcretePrototype1, prototype.ConcretePrototype2])
    def test_clone_is_new_object_of_same_type(self, cls):
        original = cls(7)
        clone = original.clone()

        assert clone is not original
        assert type(clone) is cls
        assert clone.id == 7

    def test_clone_is_independent(self):
        original = prototype.ConcretePrototype1(1)
        clone = original.clone()
        clone.id = 2
        assert original.id == 1

    def test_demo(self, narration):
        assert narration(prototype.demo) == [
            "Original object id: 1",
            "Cloned object id: 1",
        ]
