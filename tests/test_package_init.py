import importlib
import importlib.metadata as metadata
import builtins
import io

import pytest

import measura.catalog.registry as regmod
from measura.catalog.registry import _bootstrap_default_catalog


@pytest.fixture()
def fresh_catalog(monkeypatch):
    cat = _bootstrap_default_catalog()
    # get_default_catalog hands out the process-wide instance; bind it to ours
    monkeypatch.setattr(regmod, "get_default_catalog", lambda: cat, raising=True)
    return cat


def test_version_fallback(monkeypatch):
    # Force PackageNotFoundError
    monkeypatch.setattr(metadata, "version", lambda _: (_ for _ in ()).throw(metadata.PackageNotFoundError))

    # Fake pyproject.toml content
    fake_toml = b"[project]\nversion = '0.1.0'\n"
    monkeypatch.setattr(builtins, "open", lambda *_: io.BytesIO(fake_toml))

    # Reload the module so the fallback branch executes
    import measura
    importlib.reload(measura)

    assert measura.__version__ == "0.1.0"


def test_catalog_package_lazy_default(monkeypatch, fresh_catalog):
    import measura.catalog as catalog_pkg
    monkeypatch.setattr(catalog_pkg, "get_default_catalog", regmod.get_default_catalog, raising=True)
    assert catalog_pkg.DEFAULT_CATALOG is fresh_catalog


def test_root_lazy_default_catalog(monkeypatch, fresh_catalog):
    import measura
    monkeypatch.setattr(measura, "get_default_catalog", regmod.get_default_catalog, raising=True)
    assert measura.default_catalog is fresh_catalog
    assert measura.default_catalog.convert("mph", "km/h", 55.0) == pytest.approx(88.51392)


def test_unknown_module_attribute_raises_attributeerror():
    import measura
    import measura.catalog as catalog_pkg
    with pytest.raises(AttributeError):
        _ = getattr(measura, "definitely_not_a_public_attr")
    with pytest.raises(AttributeError):
        _ = getattr(catalog_pkg, "definitely_not_a_public_attr")


def test_dir_includes_lazy_names():
    import measura
    import measura.catalog as catalog_pkg
    names = dir(measura)
    assert "default_catalog" in names
    assert names == sorted(names)
    assert "DEFAULT_CATALOG" in dir(catalog_pkg)


def test_public_api_exports():
    import measura
    for name in measura.__all__:
        assert hasattr(measura, name), name
