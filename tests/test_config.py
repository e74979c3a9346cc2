import flexgrow.config as config
from flexgrow import Child, ContainerBuilder, reset_config, set_config


def test_set_config():
    reset_config()
    set_config(grow=2.0, priority=3, margin_between=1)
    assert Child("a").constraints.grow == 2.0
    assert Child("a").optional().priority == 3
    assert ContainerBuilder(10).margin_between == 1
    # an explicit margin still wins
    assert ContainerBuilder(10, margin_between=0).margin_between == 0
    # None resets to the configured default
    assert Child("a").with_grow(5).with_grow(None).constraints.grow == 2.0
    reset_config()


def test_ignored_values():
    reset_config()
    set_config(grow=None, unknown=4)
    assert config.g == dict(config.defaults)
    assert "unknown" not in config.g


def test_reset_config():
    set_config(margin_between=5)
    reset_config()
    assert config.g["margin_between"] == 0
    assert ContainerBuilder(10).margin_between == 0
