from securepassgen.config import DEFAULTS, env_key, load_config


def test_defaults_without_env():
    cfg = load_config({})
    assert cfg == DEFAULTS
    assert cfg is not DEFAULTS


def test_env_overrides():
    cfg = load_config({"SECUREPASSGEN_LENGTH": "24", "SECUREPASSGEN_MIN_SYMBOLS": " 3 "})
    assert cfg["length"] == 24
    assert cfg["min_symbols"] == 3
    assert cfg["min_uppercase"] == DEFAULTS["min_uppercase"]


def test_invalid_values_ignored(caplog):
    cfg = load_config({"SECUREPASSGEN_LENGTH": "lots", "SECUREPASSGEN_COPIES": "-2"})
    assert cfg["length"] == DEFAULTS["length"]
    assert cfg["copies"] == DEFAULTS["copies"]
    assert "SECUREPASSGEN_LENGTH" in caplog.text


def test_env_key():
    assert env_key("min_numbers") == "SECUREPASSGEN_MIN_NUMBERS"
