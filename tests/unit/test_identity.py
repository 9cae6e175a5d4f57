from pathlib import Path

import pytest

from wasilibs_tasks.config import LibraryIdentity, NameRegistry, load_identity
from wasilibs_tasks.config import identity as identity_mod


class TestNameRegistry:
    def test_setters_overwrite(self) -> None:
        registry = NameRegistry()
        registry.set_library_name("first")
        registry.set_library_name("libinjection")
        registry.set_library_repo("client9/libinjection")

        assert registry.identity() == LibraryIdentity("libinjection", "client9/libinjection")

    def test_empty_values_accepted(self) -> None:
        registry = NameRegistry()
        registry.set_library_name("")
        registry.set_library_repo("")
        assert registry.identity() == LibraryIdentity("", "")

    def test_identity_is_a_snapshot(self) -> None:
        registry = NameRegistry()
        registry.set_library_name("re2")
        snapshot = registry.identity()
        registry.set_library_name("other")

        assert snapshot.library_name == "re2"

    def test_identity_is_frozen(self) -> None:
        ident = LibraryIdentity("re2", "google/re2")
        with pytest.raises(AttributeError):
            ident.library_name = "x"  # type: ignore[misc]

    def test_module_level_setters_use_default_registry(self, monkeypatch: pytest.MonkeyPatch) -> None:
        registry = NameRegistry()
        monkeypatch.setattr(identity_mod, "_default_registry", registry)

        identity_mod.set_library_name("pcre2")
        identity_mod.set_library_repo("PCRE2Project/pcre2")

        assert identity_mod.default_registry().identity() == LibraryIdentity(
            "pcre2", "PCRE2Project/pcre2"
        )


class TestLoadIdentity:
    def test_tags(self) -> None:
        ident = LibraryIdentity("re2", "google/re2")
        assert ident.cgo_tag == "re2_cgo"
        assert ident.bench_default_tag == "re2_bench_default"

    def test_from_env(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WASILIBS_LIBRARY_NAME", "re2")
        monkeypatch.setenv("WASILIBS_LIBRARY_REPO", "google/re2")
        assert LibraryIdentity.from_env() == LibraryIdentity("re2", "google/re2")

    def test_yaml_over_base(self, clean_env: None, tmp_path: Path) -> None:
        (tmp_path / "wasilibs.yaml").write_text(
            "library_name: protobuf\nlibrary_repo: protocolbuffers/protobuf\n", encoding="utf-8"
        )
        base = LibraryIdentity("base", "base/base")
        assert load_identity(tmp_path, base=base) == LibraryIdentity(
            "protobuf", "protocolbuffers/protobuf"
        )

    def test_env_over_yaml(self, clean_env: None, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "wasilibs.yaml").write_text("library_name: protobuf\n", encoding="utf-8")
        monkeypatch.setenv("WASILIBS_LIBRARY_NAME", "env-name")

        resolved = load_identity(tmp_path, base=LibraryIdentity("base", "base/repo"))

        assert resolved == LibraryIdentity("env-name", "base/repo")

    def test_missing_file_keeps_base(self, clean_env: None, tmp_path: Path) -> None:
        base = LibraryIdentity("base", "base/repo")
        assert load_identity(tmp_path, base=base) == base

    def test_missing_everything_is_empty(self, clean_env: None, tmp_path: Path) -> None:
        assert load_identity(tmp_path) == LibraryIdentity("", "")

    def test_non_mapping_yaml_raises(self, clean_env: None, tmp_path: Path) -> None:
        (tmp_path / "wasilibs.yaml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="expected a mapping"):
            load_identity(tmp_path)

    def test_invalid_yaml_raises_value_error(self, clean_env: None, tmp_path: Path) -> None:
        (tmp_path / "wasilibs.yaml").write_text("library_name: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="invalid YAML"):
            load_identity(tmp_path)
