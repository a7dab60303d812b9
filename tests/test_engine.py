import pytest

from robosim.autonomous import AutonomousRobot
from robosim.engine import SimulationEngine
from robosim.environment import Environment
from robosim.remote import RemoteControlledRobot


@pytest.fixture
def engine():
    return SimulationEngine(Environment())


def test_update_does_nothing_when_not_running(engine):
    robot = engine.add_robot("remote", 1, (100.0, 100.0), 5.0, 0.0, 50.0)
    assert engine.update(engine.last_update + 1.0) is False
    assert robot.position == (100.0, 100.0)


def test_update_waits_for_a_full_time_step(engine):
    calls = []
    engine.add_listener(lambda: calls.append(1))
    engine.start()
    assert engine.update(engine.last_update + 0.005) is False
    assert calls == []
    later = engine.last_update + 0.1
    assert engine.update(later) is True
    assert calls == [1]
    assert engine.last_update == later


def test_pause_and_resume(engine):
    engine.start()
    engine.pause()
    assert engine.update(engine.last_update + 1.0) is False
    engine.resume()
    assert engine.running is True
    assert engine.update(engine.last_update + 0.001) is False
    assert engine.update(engine.last_update + 1.0) is True


def test_stop_halts_updates(engine):
    engine.start()
    engine.stop()
    assert engine.running is False
    assert engine.update(engine.last_update + 1.0) is False


def test_add_robot_kinds(engine):
    auto = engine.add_robot("autonomous", 1, (10.0, 20.0), 1.0, 0.0, 30.0)
    remote = engine.add_robot("anything", 2, (50.0, 60.0), 1.0, 0.0, 30.0)
    assert isinstance(auto, AutonomousRobot)
    assert isinstance(remote, RemoteControlledRobot)
    assert auto.max_width == 800.0 and auto.max_height == 600.0
    assert [r.id for r in engine.robots] == [1, 2]


def test_add_and_get_obstacle(engine):
    obstacle = engine.add_obstacle(7, (100.0, 100.0), 20.0)
    assert engine.get_obstacle(7) is obstacle
    assert engine.get_obstacle(8) is None
    assert engine.obstacles == [obstacle]


def test_update_robot_changes_settings(engine):
    engine.add_robot("remote", 3, (0.0, 0.0), 1.0, 0.0, 10.0)
    engine.update_robot(3, 4.0, 90.0, 25.0, 15.0, 35.0)
    robot = engine.get_robot(3)
    assert robot.speed == 4.0
    assert robot.orientation == 90.0
    assert robot.sensor_range == 25.0
    assert robot.position == (15.0, 35.0)


def test_update_unknown_robot_raises(engine):
    with pytest.raises(KeyError):
        engine.update_robot(42, 1.0, 0.0, 1.0, 0.0, 0.0)


def test_update_obstacle(engine):
    engine.add_obstacle(1, (50.0, 50.0), 10.0)
    engine.update_obstacle(1, 30.0, 200.0, 300.0)
    obstacle = engine.get_obstacle(1)
    assert obstacle.size == 30.0
    assert obstacle.bounds.center == (200.0, 300.0)
    with pytest.raises(KeyError):
        engine.update_obstacle(2, 1.0, 0.0, 0.0)


def test_remove_robot_and_obstacle(engine):
    engine.add_robot("remote", 1, (0.0, 0.0), 1.0, 0.0, 10.0)
    engine.add_obstacle(2, (50.0, 50.0), 10.0)
    assert engine.remove_robot(1) is True
    assert engine.remove_robot(1) is False
    assert engine.remove_obstacle(2) is True
    assert engine.remove_obstacle(2) is False
    assert engine.robots == [] and engine.obstacles == []


def test_send_command_reaches_only_remote_robots(engine):
    remote = engine.add_robot("remote", 1, (100.0, 100.0), 2.0, 0.0, 10.0)
    auto = engine.add_robot("autonomous", 2, (400.0, 300.0), 2.0, 0.0, 10.0)
    engine.send_command("start_move_forward")
    assert remote.moving_forward is True
    assert not hasattr(auto, "moving_forward")


def test_step_moves_remote_then_applies_commands(engine):
    robot = engine.add_robot("remote", 1, (100.0, 100.0), 5.0, 0.0, 10.0)
    engine.step()
    first_x = robot.position[0]
    assert first_x > 100.0
    assert robot.current_speed == 0.0
    engine.step()
    assert robot.position[0] == first_x
    engine.send_command("start_move_forward")
    engine.step()
    assert robot.current_speed == robot.speed
    engine.step()
    assert robot.position[0] > first_x


def test_step_moves_autonomous_robot(engine):
    robot = engine.add_robot("autonomous", 1, (400.0, 300.0), 2.0, 0.0, 50.0)
    engine.step()
    assert robot.position[0] > 400.0
    assert robot.position[1] == pytest.approx(300.0)