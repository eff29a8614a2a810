"""
Test script for configuration and logging setup.
"""
import json
import logging
import os

from reversi.config import Config, get_default_config, load_config
from reversi.logger import setup_logger


def test_config_save_and_load(tmp_path):
    """Test creating, saving and loading a config."""
    config = get_default_config()
    config.arena.num_games = 7
    config.play.show_valid_moves = True

    path = tmp_path / "nested" / "config.json"
    config.save(str(path))
    loaded_config = Config.load(str(path))

    assert loaded_config.to_dict() == config.to_dict()
    assert loaded_config.arena.num_games == 7


def test_missing_sections_use_defaults():
    config = Config.from_dict({'arena': {'seed': None}})

    assert config.project_name == "Reversi"
    assert config.arena.seed is None
    assert config.arena.num_games == 100
    assert config.logging.log_level == "INFO"


def test_load_config_falls_back_to_defaults(tmp_path):
    config = load_config(str(tmp_path / "missing.json"))
    assert config.to_dict() == get_default_config().to_dict()
    assert load_config(None).to_dict() == get_default_config().to_dict()


def test_default_config_file():
    """The shipped config file matches the defaults."""
    config_path = os.path.join(os.path.dirname(__file__), "configs", "default_config.json")
    with open(config_path) as f:
        data = json.load(f)
    assert Config.from_dict(data).to_dict() == get_default_config().to_dict()


def test_logger_writes_file(tmp_path):
    config = get_default_config()
    config.logging.log_to_file = True
    config.logging.log_dir = str(tmp_path)

    run_logger = setup_logger(config)
    run_logger.log_metrics({'games': 5, 'duration': 0.5}, step=3)
    run_dir = run_logger.run_dir
    run_logger.close()

    with open(os.path.join(run_dir, 'reversi.log')) as f:
        assert "Step 3: games=5 duration=0.5000" in f.read()
    assert os.path.exists(os.path.join(run_dir, 'config.json'))
    assert run_logger.handlers == []


def test_logger_console_only_by_default():
    config = get_default_config()
    run_logger = setup_logger(config)

    assert run_logger.run_dir is None
    assert len(run_logger.handlers) == 1
    assert run_logger.console in logging.getLogger().handlers

    run_logger.close()
    assert run_logger.console not in logging.getLogger().handlers
