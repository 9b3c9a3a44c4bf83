from upi_insights import config


def test_missing_file_yields_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv(config.CONFIG_ENV, raising=False)
    cfg = config.load_config(tmp_path / "nope.yaml")
    assert cfg["storage"]["backend"] == "json"
    assert cfg["currency_symbol"] == "₹"
    assert cfg["palette"] == ["#FF6384", "#36A2EB", "#FFCE56"]


def test_partial_file_is_merged_with_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("storage:\n  backend: sqlite\n  path: my.db\ncurrency_symbol: $\n", encoding="utf-8")

    cfg = config.load_config(path)

    assert cfg["storage"] == {"backend": "sqlite", "path": "my.db", "key": "transactions"}
    assert cfg["currency_symbol"] == "$"
    assert "json" in cfg["storage_backends"]
    assert cfg["output_modules"]["excel"].endswith("ExcelOutput")


def test_env_var_points_at_config(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("output_dir: reports\n", encoding="utf-8")
    monkeypatch.setenv(config.CONFIG_ENV, str(path))
    assert config.load_config()["output_dir"] == "reports"


def test_defaults_are_not_shared_between_loads(monkeypatch):
    monkeypatch.delenv(config.CONFIG_ENV, raising=False)
    first = config.load_config()
    first["storage"]["backend"] = "memory"
    assert config.load_config()["storage"]["backend"] == "json"
    assert config.DEFAULT_CONFIG["storage"]["backend"] == "json"
