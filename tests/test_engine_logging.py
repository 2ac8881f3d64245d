import logging

from blockdrop import Command, ShapeType


def test_lifecycle_is_logged(make_engine, caplog):
    engine = make_engine(ShapeType.O)
    with caplog.at_level(logging.INFO, logger="blockdrop.engine"):
        engine.dispatch(Command.START)
        engine.dispatch(Command.TOGGLE_PAUSE)
        engine.dispatch(Command.TOGGLE_PAUSE)
        engine.dispatch(Command.RESET)
    assert caplog.messages == ["Game started", "Paused", "Resumed", "Game reset"]


def test_game_over_is_logged(make_engine, caplog):
    engine = make_engine(ShapeType.O)
    engine.state.board.set_cell(4, 0, 1)
    with caplog.at_level(logging.INFO, logger="blockdrop.engine"):
        engine.dispatch(Command.START)
    assert "Game over. Final score: 0" in caplog.messages


def test_clear_is_logged(make_engine, caplog):
    engine = make_engine(ShapeType.I, clear_delay_ms=0)
    engine.dispatch(Command.START)
    engine.state.board.grid[19, :] = 1
    engine.state.board.grid[19, 4:8] = 0
    with caplog.at_level(logging.INFO, logger="blockdrop.engine"):
        for _ in range(20):
            engine.dispatch(Command.SOFT_DROP)
    assert "Clearing row(s) [19]" in caplog.messages
    assert "Cleared 1 row(s). Score: 100" in caplog.messages


def test_unknown_command_logged_at_debug(make_engine, caplog):
    engine = make_engine(ShapeType.O)
    with caplog.at_level(logging.DEBUG, logger="blockdrop.engine"):
        engine.dispatch("Jump")
    assert "Ignoring unknown command 'Jump'" in caplog.messages
