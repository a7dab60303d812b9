import pytest

from robosim.autonomous import AutonomousRobot
from robosim.config_file import (
    ConfigurationError,
    load_new_configuration,
    save_configuration,
)
from robosim.environment import Environment
from robosim.obstacle import Obstacle
from robosim.remote import RemoteControlledRobot
from robosim.settings import get_config_path, set_config_path


@pytest.fixture(autouse=True)
def _reset_config_path():
    set_config_path("")
    yield
    set_config_path("")


@pytest.fixture
def fallback(tmp_path):
    path = tmp_path / "fallback.txt"
    path.write_text("Obstacle 99 400 300 20\n", encoding="utf-8")
    return path


def test_load_replaces_environment_and_sets_path(tmp_path, fallback):
    path = tmp_path / "world.txt"
    path.write_text(
        "Robot autonomous 1 100 200 2 45 50\n"
        "\n"
        "Robot\n"
        "Robot remote 2 300 400 3 90 60\n"
        "Obstacle 5 150 250 30\n",
        encoding="utf-8",
    )
    env = Environment()
    env.add_obstacle(Obstacle(42, (1, 1), 1))

    load_new_configuration(env, path, fallback)

    assert get_config_path() == str(path)
    assert [type(r) for r in env.robots] == [AutonomousRobot, RemoteControlledRobot]
    assert [r.id for r in env.robots] == [1, 2]
    assert env.robots[0].position == (100.0, 200.0)
    assert env.robots[0].environment is env
    assert (env.robots[0].max_width, env.robots[0].max_height) == (800.0, 600.0)
    assert [o.id for o in env.obstacles] == [5]
    assert env.obstacles[0].size == 30.0


def test_unknown_robot_type_is_ignored(tmp_path, fallback):
    path = tmp_path / "world.txt"
    path.write_text("Robot hover 3 1 1 1 1 1\nObstacle 2 20 20 4\n", encoding="utf-8")
    env = Environment()
    load_new_configuration(env, path, fallback)
    assert env.robots == []
    assert [o.id for o in env.obstacles] == [2]


def test_bad_line_loads_fallback_and_raises(tmp_path, fallback):
    path = tmp_path / "world.txt"
    path.write_text(
        "Obstacle 1 10 10 5\n"
        "Obstacle 2 10 10\n"
        "Obstacle 3 30 30 5\n",
        encoding="utf-8",
    )
    env = Environment()
    with pytest.raises(ConfigurationError, match="Incorrect configuration string format"):
        load_new_configuration(env, path, fallback)

    assert [o.id for o in env.obstacles] == [1, 99]
    assert get_config_path() == ""


def test_bad_line_with_missing_fallback_still_raises(tmp_path):
    path = tmp_path / "world.txt"
    path.write_text("Robot remote 1 2\n", encoding="utf-8")
    env = Environment()
    with pytest.raises(ConfigurationError):
        load_new_configuration(env, path, tmp_path / "absent.txt")
    assert env.robots == [] and env.obstacles == []


def test_missing_file_clears_and_raises(tmp_path, fallback):
    env = Environment()
    env.add_obstacle(Obstacle(1, (5, 5), 2))
    with pytest.raises(ConfigurationError, match="Could not open file"):
        load_new_configuration(env, tmp_path / "absent.txt", fallback)
    assert env.obstacles == []
    assert get_config_path() == ""


def test_save_writes_expected_text(tmp_path):
    path = tmp_path / "out.txt"
    save_configuration(
        path,
        [["remote", 3, 10, 20, 1.5, 90, 30]],
        [[7, 100, 100, 10]],
    )
    assert path.read_text(encoding="utf-8") == (
        "Robot remote 3 10 20 1.5 90 30\nObstacle 7 100 100 10\n"
    )


def test_save_writes_undefined_for_missing_cells(tmp_path):
    path = tmp_path / "out.txt"
    save_configuration(path, [["autonomous", None, 0, 0, 1.0, 0, 100]], [])
    assert path.read_text(encoding="utf-8") == "Robot autonomous undefined 0 0 1.0 0 100\n"


def test_save_then_load_round_trip(tmp_path, fallback):
    path = tmp_path / "round.txt"
    save_configuration(
        path,
        [["autonomous", 4, 120, 130, 2.5, 30, 70], ["remote", 5, 500, 400, 1.0, 0, 40]],
        [[8, 250, 260, 15]],
    )
    env = Environment()
    load_new_configuration(env, path, fallback)

    auto, remote = env.robots
    assert isinstance(auto, AutonomousRobot)
    assert (auto.id, auto.position, auto.speed, auto.orientation, auto.sensor_range) == (
        4, (120.0, 130.0), 2.5, 30.0, 70.0,
    )
    assert isinstance(remote, RemoteControlledRobot)
    assert (remote.id, remote.position, remote.speed) == (5, (500.0, 400.0), 1.0)
    assert [(o.id, o.position, o.size) for o in env.obstacles] == [(8, (250.0, 260.0), 15.0)]


def test_unreadable_numbers_count_as_zero(tmp_path, fallback):
    path = tmp_path / "round.txt"
    save_configuration(path, [["remote", None, 10, 10, 1.0, 0, 100]], [])
    env = Environment()
    load_new_configuration(env, path, fallback)
    assert env.robots[0].id == 0


def test_save_to_missing_directory_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="Could not save file to"):
        save_configuration(tmp_path / "nowhere" / "out.txt", [], [])