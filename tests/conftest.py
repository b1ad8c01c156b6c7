import pytest

from cssdedup.config import hierarchy


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep the user's global config and CSSDEDUP_* variables out of every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr(hierarchy, "_GLOBAL_CONFIG_PATH", home / ".cssdedup" / "config.yaml")
    for env_key in hierarchy._ENV_MAP:
        monkeypatch.delenv(env_key, raising=False)


@pytest.fixture
def duplicated_css():
    """Two build units' output concatenated: shared preflight plus one unique rule each."""
    return """
@layer base {
  *, :before, :after { box-sizing: border-box; margin: 0; }
}
.btn { color: red; }
@layer base {
  *, :before, :after { box-sizing: border-box; margin: 0; }
}
.btn { color: red; }
.card { padding: 8px; }
"""


@pytest.fixture
def css_dir(tmp_path, duplicated_css):
    """A directory holding two stylesheets and one unrelated file."""
    (tmp_path / "a.css").write_text(duplicated_css, encoding="utf-8")
    (tmp_path / "b.css").write_text(".x { color: blue; }\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text(".x { color: blue; } .x { color: blue; }")
    return tmp_path
