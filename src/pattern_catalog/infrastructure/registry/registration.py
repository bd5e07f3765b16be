"""Pattern registration - catalog entries for every pattern module."""

from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from pattern_catalog.domain.catalog.value_objects import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.patterns.behavioral import (
    chain_of_responsibility,
    command,
    interpreter,
    iterator,
    mediator,
    memento,
    observer,
    state,
    strategy,
    template_method,
    visitor,
)
from pattern_catalog.patterns.creational import (
    abstract_factory,
    builder,
    factory_method,
    prototype,
    singleton,
)
from pattern_catalog.patterns.structural import (
    adapter,
    bridge,
    composite,
    decorator,
    facade,
    flyweight,
    proxy,
)

if TYPE_CHECKING:
    from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry

logger = get_logger(__name__)

CREATIONAL = PatternCategory.CREATIONAL
STRUCTURAL = PatternCategory.STRUCTURAL
BEHAVIORAL = PatternCategory.BEHAVIORAL

# (slug, title, category, summary, demo) in catalog order
PATTERN_DEFINITIONS: List[Tuple[str, str, PatternCategory, str, Callable[[], None]]] = [
    ("singleton", "Singleton", CREATIONAL,
     "Ensure a class has only one instance and a global point of access to it.",
     singleton.demo),
    ("factory-method", "Factory Method", CREATIONAL,
     "Let subclasses decide which class to instantiate.",
     factory_method.demo),
    ("abstract-factory", "Abstract Factory", CREATIONAL,
     "Create families of related objects without naming their concrete classes.",
     abstract_factory.demo),
    ("builder", "Builder", CREATIONAL,
     "Separate the construction of a complex object from its representation.",
     builder.demo),
    ("prototype", "Prototype", CREATIONAL,
     "Create new objects by copying a prototypical instance.",
     prototype.demo),
    ("adapter", "Adapter", STRUCTURAL,
     "Convert the interface of a class into one clients expect.",
     adapter.demo),
    ("bridge", "Bridge", STRUCTURAL,
     "Decouple an abstraction from its implementation so the two can vary independently.",
     bridge.demo),
    ("composite", "Composite", STRUCTURAL,
     "Compose objects into trees and treat individual objects and compositions uniformly.",
     composite.demo),
    ("decorator", "Decorator", STRUCTURAL,
     "Attach additional responsibilities to an object dynamically.",
     decorator.demo),
    ("facade", "Facade", STRUCTURAL,
     "Provide a unified interface to a set of interfaces in a subsystem.",
     facade.demo),
    ("flyweight", "Flyweight", STRUCTURAL,
     "Use sharing to support large numbers of fine-grained objects.",
     flyweight.demo),
    ("proxy", "Proxy", STRUCTURAL,
     "Provide a surrogate that controls access to another object.",
     proxy.demo),
    ("chain-of-responsibility", "Chain of Responsibility", BEHAVIORAL,
     "Pass a request along a chain of handlers until one handles it.",
     chain_of_responsibility.demo),
    ("command", "Command", BEHAVIORAL,
     "Encapsulate a request as an object.",
     command.demo),
    ("interpreter", "Interpreter", BEHAVIORAL,
     "Represent a grammar and interpret sentences in it.",
     interpreter.demo),
    ("iterator", "Iterator", BEHAVIORAL,
     "Access the elements of an aggregate sequentially without exposing it.",
     iterator.demo),
    ("mediator", "Mediator", BEHAVIORAL,
     "Define an object that encapsulates how a set of objects interact.",
     mediator.demo),
    ("memento", "Memento", BEHAVIORAL,
     "Capture and restore an object's internal state without violating encapsulation.",
     memento.demo),
    ("observer", "Observer", BEHAVIORAL,
     "Notify dependents automatically when an object changes state.",
     observer.demo),
    ("state", "State", BEHAVIORAL,
     "Let an object alter its behavior when its internal state changes.",
     state.demo),
    ("strategy", "Strategy", BEHAVIORAL,
     "Define a family of interchangeable algorithms.",
     strategy.demo),
    ("template-method", "Template Method", BEHAVIORAL,
     "Define the skeleton of an algorithm and defer some steps to subclasses.",
     template_method.demo),
    ("visitor", "Visitor", BEHAVIORAL,
     "Define a new operation without changing the classes it operates on.",
     visitor.demo),
]


def register_all_patterns(registry: Optional["PatternRegistry"] = None) -> "PatternRegistry":
    """Register every catalog pattern. Safe to call more than once."""
    if registry is None:
        from pattern_catalog.infrastructure.registry.pattern_registry import (
            get_pattern_registry,
        )

        registry = get_pattern_registry()

    for slug, title, category, summary, demo in PATTERN_DEFINITIONS:
        info = PatternInfo(slug=slug, title=title, category=category, summary=summary, demo=demo)
        try:
            registry.register(info)
        except ValueError as e:
            # Ignore if already registered (idempotent registration)
            if "already registered" in str(e):
                logger.debug(f"Pattern already registered: {str(e)}")
            else:
                raise

    return registry
