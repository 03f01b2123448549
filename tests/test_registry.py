# tests/test_registry.py

"""Tests pour elkargs/domain/registry.py"""

import pytest

from elkargs.domain.errors import FlagAlreadyRegisteredError
from elkargs.domain.flags import Flag, FlagKind
from elkargs.domain.registry import FlagRegistry, add_flag


@pytest.fixture
def registry():
    return FlagRegistry()


# =============================================================================
# add_flag
# =============================================================================
class TestAddFlag:
    def test_populates_flag(self, registry):
        """L'enregistrement remplit les noms et le type."""
        flag = Flag()

        result = registry.add_flag(flag, "verbose", "v", FlagKind.BOOL)

        assert result is flag
        assert flag.long_name == "verbose"
        assert flag.short_name == "v"
        assert flag.kind is FlagKind.BOOL
        assert flag.as_bool is False
        assert flag.is_registered is True

    def test_string_flag_starts_as_none(self, registry):
        flag = registry.add_flag(Flag(), None, "m", FlagKind.STRING)

        assert flag.as_string is None

    def test_default_kind_is_bool(self, registry):
        flag = registry.add_flag(Flag(), "quiet")

        assert flag.kind is FlagKind.BOOL
        assert flag.short_name is None

    def test_accepts_kind_as_string(self, registry):
        flag = registry.add_flag(Flag(), "name", None, "string")  # type: ignore[arg-type]

        assert flag.kind is FlagKind.STRING

    def test_new_flag_becomes_head(self, registry):
        """Le dernier flag enregistré est en tête."""
        first = registry.add_flag(Flag(), "a")
        second = registry.add_flag(Flag(), "b")

        assert registry.first is second
        assert list(registry) == [second, first]

    def test_no_names_is_accepted(self, registry):
        """Un flag sans nom est accepté (mais ne matche jamais)."""
        flag = registry.add_flag(Flag(), None, None, FlagKind.BOOL)

        assert flag in registry
        assert len(registry) == 1

    def test_duplicate_names_are_accepted(self, registry):
        registry.add_flag(Flag(), "v")
        registry.add_flag(Flag(), "v")

        assert len(registry) == 2

    def test_same_flag_twice_raises(self, registry):
        """Réenregistrer le même objet flag est refusé."""
        flag = registry.add_flag(Flag(), "verbose", "v", FlagKind.BOOL)

        with pytest.raises(FlagAlreadyRegisteredError):
            registry.add_flag(flag, "verbose", "v", FlagKind.STRING)

        assert flag.kind is FlagKind.BOOL
        assert len(registry) == 1

    def test_module_level_function(self, registry):
        flag = add_flag(registry, Flag(), "verbose", "v", FlagKind.BOOL)

        assert registry.first is flag


# =============================================================================
# Lookup
# =============================================================================
class TestLookup:
    def test_find_long(self, registry):
        verbose = registry.add_flag(Flag(), "verbose", "v")
        registry.add_flag(Flag(), "debug", "d")

        assert registry.find_long("verbose") is verbose
        assert registry.find_long("nope") is None

    def test_find_short(self, registry):
        registry.add_flag(Flag(), "verbose", "v")
        message = registry.add_flag(Flag(), None, "m", FlagKind.STRING)

        assert registry.find_short("m") is message
        assert registry.find_short("x") is None

    def test_find_short_empty_never_matches(self, registry):
        registry.add_flag(Flag(), "verbose", "v")

        assert registry.find_short("") is None

    def test_absent_names_are_skipped(self, registry):
        """Un nom absent ne matche pas, même une chaîne vide."""
        registry.add_flag(Flag(), None, None)

        assert registry.find_long("") is None
        assert registry.find_short("v") is None

    def test_most_recent_wins(self, registry):
        """En cas de doublon, le dernier enregistré gagne."""
        first = registry.add_flag(Flag(), "v", "v")
        second = registry.add_flag(Flag(), "v", "v")

        assert registry.find_long("v") is second
        assert registry.find_short("v") is second
        assert registry.find_long("v") is not first

    def test_custom_name_equals(self):
        """Le comparateur de noms est configurable."""
        registry = FlagRegistry(name_equals=lambda a, b: a.lower() == b.lower())
        verbose = registry.add_flag(Flag(), "verbose", "v")

        assert registry.find_long("VERBOSE") is verbose
        assert registry.find_short("V") is verbose


# =============================================================================
# Container
# =============================================================================
class TestContainer:
    def test_empty_registry(self, registry):
        assert len(registry) == 0
        assert registry.first is None
        assert list(registry) == []

    def test_contains_uses_identity(self, registry):
        registry.add_flag(Flag(), "verbose")

        assert Flag() not in registry
