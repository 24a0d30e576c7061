"""
Registries and the grammar context.

A ``GrammarContext`` bundles the token, token-type, unit and style registries
with the engine configuration and the expansion cache. Registries are
populated once, then sealed and read-only, so cached expansions stay valid
for the lifetime of the context.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

from .config import EngineConfig
from .errors import RegistryError
from .ir.tokens import StyleDefinition, TokenDefinition, UnitDefinition
from .token_types import TokenType, builtin_token_types

if TYPE_CHECKING:
    from .ir.syntax import ExpandedSyntax

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Registry(Generic[T]):
    """Keyed store that rejects duplicates and becomes read-only once sealed."""

    kind = "entry"

    def __init__(self) -> None:
        self._items: dict[str, T] = {}
        self._sealed = False

    def _normalize(self, key: str) -> str:
        return key

    def register(self, key: str, item: T) -> None:
        """
        Register an entry.

        Raises:
            RegistryError: If the registry is sealed or the key is taken
        """
        if self._sealed:
            raise RegistryError(f"Cannot register {self.kind} '{key}': registry is sealed")
        normalized = self._normalize(key)
        if normalized in self._items:
            raise RegistryError(f"Duplicate {self.kind} '{key}'")
        self._items[normalized] = item

    def seal(self) -> None:
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get(self, key: str) -> T | None:
        return self._items.get(self._normalize(key))

    def require(self, key: str) -> T:
        """
        Get an entry by key.

        Raises:
            RegistryError: If nothing is registered under the key
        """
        item = self.get(key)
        if item is None:
            available = ", ".join(sorted(self._items)) or "none"
            raise RegistryError(f"Unknown {self.kind} '{key}'. Available: {available}")
        return item

    def keys(self) -> list[str]:
        return list(self._items)

    def all(self) -> list[T]:
        return list(self._items.values())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._normalize(key) in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)


class TokenRegistry(_Registry[TokenDefinition]):
    kind = "token"

    def add(self, definition: TokenDefinition) -> None:
        self.register(definition.key, definition)


class UnitRegistry(_Registry[UnitDefinition]):
    """Units looked up case-insensitively (``10PX`` is a length)."""

    kind = "unit"

    def _normalize(self, key: str) -> str:
        return key.lower()

    def add(self, unit: UnitDefinition) -> None:
        self.register(unit.key, unit)


class TokenTypeRegistry(_Registry[TokenType]):
    kind = "token type"

    def add(self, token_type: TokenType) -> None:
        if not isinstance(token_type, TokenType):
            raise RegistryError(f"{type(token_type).__name__} must extend TokenType")
        self.register(token_type.key, token_type)

    def in_match_order(self) -> list[TokenType]:
        """Types in the order value classification tries them."""
        return sorted(self._items.values(), key=lambda t: t.match_order)


class StyleRegistry(_Registry[StyleDefinition]):
    kind = "style"

    def add(self, style: StyleDefinition) -> None:
        self.register(style.key, style)


class GrammarContext:
    """
    Everything a grammar operation needs, passed explicitly.

    Args:
        tokens: Token definitions
        units: Unit definitions
        token_types: Token type implementations (built-ins when omitted)
        styles: Style property definitions
        config: Engine limits and cache size
    """

    def __init__(
        self,
        tokens: Iterable[TokenDefinition] = (),
        units: Iterable[UnitDefinition] = (),
        token_types: Iterable[TokenType] | None = None,
        styles: Iterable[StyleDefinition] = (),
        config: EngineConfig | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.tokens = TokenRegistry()
        self.units = UnitRegistry()
        self.types = TokenTypeRegistry()
        self.styles = StyleRegistry()

        for definition in tokens:
            self.tokens.add(definition)
        for unit in units:
            self.units.add(unit)
        for token_type in builtin_token_types() if token_types is None else token_types:
            self.types.add(token_type)
        for style in styles:
            self.styles.add(style)

        for definition in self.tokens:
            if self.types.get(definition.type) is None:
                raise RegistryError(
                    f"Token {definition.key} declares unknown type '{definition.type}'"
                )

        for registry in (self.tokens, self.units, self.types, self.styles):
            registry.seal()

        self._cache: OrderedDict[str, ExpandedSyntax] = OrderedDict()
        self.cache_hits = 0
        self.cache_misses = 0

    @classmethod
    def default(cls, config: EngineConfig | None = None) -> GrammarContext:
        """Context holding the built-in tokens, units, token types and properties."""
        from .catalog import BUILTIN_TOKENS, BUILTIN_UNITS
        from .properties import BUILTIN_PROPERTIES

        return cls(
            tokens=BUILTIN_TOKENS,
            units=BUILTIN_UNITS,
            styles=BUILTIN_PROPERTIES,
            config=config,
        )

    # =========================================================================
    # Expansion cache
    # =========================================================================

    def cached(self, syntax: str) -> ExpandedSyntax | None:
        result = self._cache.get(syntax)
        if result is None:
            self.cache_misses += 1
            return None
        self._cache.move_to_end(syntax)
        self.cache_hits += 1
        return result

    def remember(self, syntax: str, result: ExpandedSyntax) -> None:
        self._cache[syntax] = result
        self._cache.move_to_end(syntax)
        while len(self._cache) > self.config.cache_size:
            evicted, _ = self._cache.popitem(last=False)
            logger.debug("Evicted cached expansion of %r", evicted)

    def clear_cache(self) -> None:
        self._cache.clear()
        self.cache_hits = 0
        self.cache_misses = 0

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    # =========================================================================
    # Shortcuts
    # =========================================================================

    def expand(self, syntax: str) -> ExpandedSyntax:
        """Expand a syntax string in this context (memoized)."""
        from .syntax_lang import expand_syntax

        return expand_syntax(syntax, self)

    def style_syntax(self, name: str) -> str:
        """
        Syntax of a registered style property.

        Raises:
            RegistryError: If the property is not registered
        """
        return self.styles.require(name).syntax

    def __repr__(self) -> str:
        return (
            f"GrammarContext(tokens={len(self.tokens)}, units={len(self.units)}, "
            f"types={len(self.types)}, styles={len(self.styles)})"
        )
