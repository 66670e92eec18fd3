import run_simulation


def test_closed_terminal_does_not_stop_the_run(monkeypatch, caplog):
    printed = []

    def fake_print(*args, **kwargs):
        text = " ".join(str(a) for a in args)
        if text.startswith(run_simulation.CLEAR_SCREEN):
            raise BrokenPipeError(32, "Broken pipe")
        printed.append(text)

    monkeypatch.setattr(run_simulation, "print", fake_print, raising=False)

    exit_code = run_simulation.main(["--numreq", "4", "--interval", "1", "--tick", "0", "--seed", "3"])

    assert exit_code == 0
    assert any(line.startswith("Simulation ended due to completion of all requests") for line in printed)
    assert "terminal output failed" in caplog.text


def test_invalid_floor_count_exits_with_config_error(capsys):
    assert run_simulation.main(["--floors", "0", "--headless"]) == 2
    assert "num_floors must be positive" in capsys.readouterr().err
