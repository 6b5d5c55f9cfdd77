import pytest

from duorank.core.config import RatingConfig, load_config
from duorank.core.errors import ConfigError
from duorank.core.tournament import Tier


def test_defaults():
    config = RatingConfig()
    assert config.finish_decay == 1.1
    assert config.age_decay == 1.1
    assert config.record_length == 10
    assert config.point_base(Tier.SMALL) == 50.0
    assert config.point_base(Tier.MEDIUM) == 125.0
    assert config.point_base(Tier.MAJOR) == 200.0
    assert config.point_base(Tier.CHAMPIONSHIP) == 250.0


def test_partial_tiers_merge_with_defaults():
    config = RatingConfig(tier_points={Tier.MAJOR: 180})
    assert config.point_base(Tier.MAJOR) == 180.0
    assert config.point_base(Tier.SMALL) == 50.0


def test_with_tier_returns_copy():
    config = RatingConfig()
    changed = config.with_tier(Tier.SMALL, 60.0)
    assert changed.point_base(Tier.SMALL) == 60.0
    assert config.point_base(Tier.SMALL) == 50.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"finish_decay": 0.0},
        {"age_decay": -1.1},
        {"finish_decay": float("nan")},
        {"record_length": 0},
        {"record_length": 2.5},
        {"tier_points": {Tier.SMALL: -5.0}},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ConfigError):
        RatingConfig(**kwargs)


def test_from_dict():
    config = RatingConfig.from_dict(
        {
            "finish_decay": 1.2,
            "record_length": 5,
            "tiers": {"Small": 40, "championship": 300},
        }
    )
    assert config.finish_decay == 1.2
    assert config.age_decay == 1.1
    assert config.record_length == 5
    assert config.point_base(Tier.SMALL) == 40.0
    assert config.point_base(Tier.MEDIUM) == 125.0
    assert config.point_base(Tier.CHAMPIONSHIP) == 300.0


@pytest.mark.parametrize(
    ("data", "message"),
    [
        ({"levels": {}}, "Unknown config keys"),
        ({"tiers": {"regional": 10}}, "Invalid tier entry"),
        ({"tiers": ["small"]}, "tiers must be a mapping"),
        ({"age_decay": "fast"}, "Invalid decay value"),
    ],
)
def test_from_dict_errors(data, message):
    with pytest.raises(ConfigError, match=message):
        RatingConfig.from_dict(data)


def test_packaged_config_matches_defaults():
    assert load_config() == RatingConfig()


def test_load_config_from_file(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        """
age_decay: 1.5
tiers:
  medium: 100
        """
    )
    config = load_config(cfg_path)
    assert config.age_decay == 1.5
    assert config.point_base(Tier.MEDIUM) == 100.0


def test_load_config_empty_file_gives_defaults(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("")
    assert load_config(cfg_path) == RatingConfig()


def test_load_config_rejects_non_mapping(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("- 1.1\n- 1.1\n")
    with pytest.raises(ConfigError, match="Invalid config format"):
        load_config(cfg_path)


def test_load_config_rejects_malformed_yaml(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("finish_decay: [1.1\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(cfg_path)
