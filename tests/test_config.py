import textwrap

import pytest

from theater.config import DEFAULT_PRICING, PricingConfig, get_config, refresh_config


def test_defaults_without_pyproject(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert refresh_config() == DEFAULT_PRICING


def test_config_loads_from_pyproject(tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text(
        textwrap.dedent(
            """
            [tool.theater.pricing]
            tragedy_base_amount = 45000
            comedy_extra_volume_factor = 20
            """
        ),
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    cfg = refresh_config()

    assert cfg.tragedy_base_amount == 45000
    assert cfg.comedy_extra_volume_factor == 20
    assert cfg.comedy_base_amount == DEFAULT_PRICING.comedy_base_amount


def test_pyproject_found_from_subdirectory(tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text("[tool.theater.pricing]\ncomedy_base_amount = 1\n", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    assert get_config().comedy_base_amount == 1


def test_env_override(tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text("[tool.theater.pricing]\ntragedy_audience_threshold = 40\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("THEATER_TRAGEDY_AUDIENCE_THRESHOLD", "25")

    assert refresh_config().tragedy_audience_threshold == 25


def test_invalid_values_fall_back_and_clamp(tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text(
        '[tool.theater.pricing]\ncomedy_base_amount = "lots"\ncomedy_extra_volume_factor = 0\n'
        "tragedy_base_amount = -5\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    cfg = refresh_config()

    assert cfg.comedy_base_amount == DEFAULT_PRICING.comedy_base_amount
    assert cfg.comedy_extra_volume_factor == 1
    assert cfg.tragedy_base_amount == 0


def test_zero_credit_divisor_is_rejected():
    with pytest.raises(ValueError, match="comedy_extra_volume_factor"):
        PricingConfig(comedy_extra_volume_factor=0)


@pytest.mark.parametrize("field_name", ["tragedy_base_amount", "comedy_amount_per_audience", "base_volume_credit_threshold"])
def test_negative_constants_are_rejected(field_name):
    with pytest.raises(ValueError, match=f"{field_name}' must be >= 0"):
        PricingConfig(**{field_name: -100})


@pytest.mark.parametrize("value", [1.5, "100", True])
def test_non_int_constants_are_rejected(value):
    with pytest.raises(ValueError, match="must be an int"):
        PricingConfig(tragedy_base_amount=value)
