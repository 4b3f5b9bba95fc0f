"""Static AutoFixture knowledge base.

All records are frozen dataclasses held in tuples and read-only mappings.
``KNOWLEDGE_BASE`` is built once at import and shared by every tool call.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

CATEGORIES = ("core", "mocking", "testing")


@dataclass(frozen=True, slots=True)
class MethodEntry:
    """A single documented method of a class."""

    name: str
    description: str
    example: str


@dataclass(frozen=True, slots=True)
class ClassEntry:
    """A documented class. Either ``methods`` or ``usage`` is normally set."""

    description: str
    methods: tuple[MethodEntry, ...] = ()
    usage: str | None = None

    @property
    def has_methods(self) -> bool:
        return bool(self.methods)

    @property
    def has_usage(self) -> bool:
        return bool(self.usage)


@dataclass(frozen=True, slots=True)
class PackageEntry:
    """A NuGet package and how to install it."""

    name: str
    description: str
    install: str
    usage: str | None = None


@dataclass(frozen=True, slots=True)
class PatternEntry:
    name: str
    code: str


@dataclass(frozen=True, slots=True)
class QuickStart:
    title: str
    content: str


@dataclass(frozen=True)
class KnowledgeBase:
    """Immutable container for every documentation record."""

    quick_start: QuickStart
    classes: Mapping[str, ClassEntry]
    packages: Mapping[str, tuple[PackageEntry, ...]]
    patterns: tuple[PatternEntry, ...]
    best_practices: tuple[str, ...]
    name: str = field(default="AutoFixture")

    def class_names(self) -> list[str]:
        return list(self.classes)

    def category_names(self) -> list[str]:
        return list(self.packages)


# ---------------------------------------------------------------------------
# Dataset
# ---------------------------------------------------------------------------

_QUICK_START = QuickStart(
    title="Quick Start Guide",
    content="""AutoFixture is a library for .NET designed to minimize the 'Arrange' phase of unit tests.

Basic Usage:
1. Install via NuGet: Install-Package AutoFixture
2. Create a Fixture instance
3. Use Create<T>() to generate test data

Example:
var fixture = new Fixture();
var anonymousText = fixture.Create<string>();
var anonymousNumber = fixture.Create<int>();
var myClass = fixture.Create<MyClass>();""",
)

_CLASSES = {
    "Fixture": ClassEntry(
        description="The main class for creating anonymous test data",
        methods=(
            MethodEntry(
                name="Create<T>()",
                description="Creates an anonymous variable of type T",
                example="var result = fixture.Create<int>(); // Returns a random int",
            ),
            MethodEntry(
                name="CreateMany<T>()",
                description="Creates multiple anonymous variables of type T",
                example="var results = fixture.CreateMany<string>(5); // Returns 5 strings",
            ),
            MethodEntry(
                name="Build<T>()",
                description="Returns a builder for customizing object creation",
                example=(
                    "var customer = fixture.Build<Customer>()"
                    ".With(x => x.Name, 'John').Create();"
                ),
            ),
            MethodEntry(
                name="Freeze<T>()",
                description="Creates and caches an instance for consistent reuse",
                example="var frozen = fixture.Freeze<Customer>(); // Same instance returned",
            ),
            MethodEntry(
                name="Inject<T>(value)",
                description="Injects a specific value to be used for type T",
                example="fixture.Inject<int>(42); // All Create<int>() calls return 42",
            ),
            MethodEntry(
                name="Customize(customization)",
                description="Applies a customization to the fixture",
                example="fixture.Customize(new AutoMoqCustomization());",
            ),
        ),
    ),
    "IFixture": ClassEntry(
        description="Interface implemented by Fixture for dependency injection",
        usage="Use IFixture in constructor parameters for better testability",
    ),
}

_PACKAGES = {
    "core": (
        PackageEntry(
            name="AutoFixture",
            description="Core library for generating anonymous test data",
            install="Install-Package AutoFixture",
        ),
        PackageEntry(
            name="AutoFixture.SeedExtensions",
            description="Extensions for seeding data generation",
            install="Install-Package AutoFixture.SeedExtensions",
        ),
        PackageEntry(
            name="AutoFixture.Idioms",
            description="Assertions for testing code idioms",
            install="Install-Package AutoFixture.Idioms",
        ),
    ),
    "mocking": (
        PackageEntry(
            name="AutoFixture.AutoMoq",
            description="Integration with Moq mocking library",
            install="Install-Package AutoFixture.AutoMoq",
            usage="fixture.Customize(new AutoMoqCustomization());",
        ),
        PackageEntry(
            name="AutoFixture.AutoNSubstitute",
            description="Integration with NSubstitute mocking library",
            install="Install-Package AutoFixture.AutoNSubstitute",
            usage="fixture.Customize(new AutoNSubstituteCustomization());",
        ),
        PackageEntry(
            name="AutoFixture.AutoFakeItEasy",
            description="Integration with FakeItEasy mocking library",
            install="Install-Package AutoFixture.AutoFakeItEasy",
            usage="fixture.Customize(new AutoFakeItEasyCustomization());",
        ),
    ),
    "testing": (
        PackageEntry(
            name="AutoFixture.Xunit2",
            description="Integration with xUnit.net v2",
            install="Install-Package AutoFixture.Xunit2",
            usage="[Theory, AutoData] public void Test(int value) { }",
        ),
        PackageEntry(
            name="AutoFixture.NUnit3",
            description="Integration with NUnit v3",
            install="Install-Package AutoFixture.NUnit3",
            usage="[Test, AutoData] public void Test(int value) { }",
        ),
    ),
}

_PATTERNS = (
    PatternEntry(
        name="Basic Object Creation",
        code="""var fixture = new Fixture();
var customer = fixture.Create<Customer>();""",
    ),
    PatternEntry(
        name="Customizing Properties",
        code="""var customer = fixture.Build<Customer>()
    .With(x => x.Name, "John Doe")
    .Without(x => x.Address)
    .Create();""",
    ),
    PatternEntry(
        name="Creating Lists",
        code="var customers = fixture.CreateMany<Customer>(10).ToList();",
    ),
    PatternEntry(
        name="Using AutoMoq",
        code="""var fixture = new Fixture()
    .Customize(new AutoMoqCustomization());
var service = fixture.Create<MyService>(); // Dependencies auto-mocked""",
    ),
    PatternEntry(
        name="Using with xUnit",
        code="""[Theory, AutoData]
public void Test_WithAutoData(int number, string text, Customer customer)
{
    // Parameters are automatically generated by AutoFixture
}""",
    ),
    PatternEntry(
        name="Freezing Instances",
        code="""var fixture = new Fixture();
var customer = fixture.Freeze<Customer>();
var order = fixture.Create<Order>(); // Order.Customer is same instance""",
    ),
    PatternEntry(
        name="Injecting Specific Values",
        code="""fixture.Inject<ILogger>(new ConsoleLogger());
var service = fixture.Create<MyService>(); // Uses ConsoleLogger""",
    ),
)

_BEST_PRACTICES = (
    "Use AutoFixture to reduce test maintenance by avoiding hard-coded test data",
    "Freeze dependencies when you need to verify interactions on the same instance",
    "Use Build<T>() for fine-grained control over object creation",
    "Combine AutoFixture with mocking libraries for comprehensive test setup",
    "Use [AutoData] attributes to simplify test method signatures",
    "Create custom ICustomization implementations for domain-specific test data",
)

KNOWLEDGE_BASE = KnowledgeBase(
    quick_start=_QUICK_START,
    classes=MappingProxyType(_CLASSES),
    packages=MappingProxyType({c: _PACKAGES[c] for c in CATEGORIES}),
    patterns=_PATTERNS,
    best_practices=_BEST_PRACTICES,
)
