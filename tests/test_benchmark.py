import pytest

from kpkboard.benchmark import DEFAULT_POSITIONS, setup_bench

START = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
OTHER = "8/8/8/8/8/6k1/6p1/6K1 w - -"


def _positions(commands):
    return [c[len("position fen "):] for c in commands if c.startswith("position fen ")]


def test_default_header_and_trailer():
    cmds = setup_bench(START, "")
    assert cmds[:3] == [
        "setoption name Threads value 1",
        "setoption name Hash value 16",
        "ucinewgame",
    ]
    assert cmds[-1] == "setoption name Use NNUE value true"


def test_default_positions_all_used_in_order():
    cmds = setup_bench(OTHER, [])
    expected = [f for f in DEFAULT_POSITIONS if "setoption" not in f]
    assert _positions(cmds) == expected


def test_default_go_command_follows_each_position():
    cmds = setup_bench(START, [])
    for i, c in enumerate(cmds):
        if c.startswith("position fen "):
            assert cmds[i + 1] == "go depth 13"


def test_setoption_entries_pass_through():
    cmds = setup_bench(START, [])
    chess960 = [c for c in cmds if "UCI_Chess960" in c]
    assert chess960 == [f for f in DEFAULT_POSITIONS if "UCI_Chess960" in f]


def test_mixed_alternates_nnue():
    cmds = setup_bench(START, "16 1 13 default depth mixed")
    toggles = [cmds[i - 1] for i, c in enumerate(cmds) if c.startswith("position fen ")]
    for n, t in enumerate(toggles):
        expected = "false" if n % 2 == 0 else "true"
        assert t == f"setoption name Use NNUE value {expected}"


def test_custom_arguments_current_position():
    cmds = setup_bench(OTHER, "64 4 5000 current movetime")
    assert cmds == [
        "setoption name Threads value 4",
        "setoption name Hash value 64",
        "ucinewgame",
        "setoption name Use NNUE value false",
        f"position fen {OTHER}",
        "go movetime 5000",
        "setoption name Use NNUE value true",
    ]


def test_eval_limit_type():
    cmds = setup_bench(START, ["16", "1", "13", "current", "eval"])
    assert cmds[5] == "eval"
    assert not any(c.startswith("go ") for c in cmds)


@pytest.mark.parametrize("eval_type,word", [("classical", "false"), ("NNUE", "true")])
def test_fixed_eval_type(eval_type, word):
    cmds = setup_bench(START, f"16 1 5 default perft {eval_type}")
    toggles = {cmds[i - 1] for i, c in enumerate(cmds) if c.startswith("position fen ")}
    assert toggles == {f"setoption name Use NNUE value {word}"}
    assert "go perft 5" in cmds


def test_unknown_eval_type_emits_no_toggle():
    cmds = setup_bench(START, "16 1 13 current depth other")
    assert cmds[3] == f"position fen {START}"
    assert cmds.count("setoption name Use NNUE value true") == 1


def test_positions_from_file_skip_blank_lines(tmp_path):
    path = tmp_path / "fens.txt"
    path.write_text(f"{START}\n\n{OTHER}\n", encoding="utf-8")
    cmds = setup_bench("", f"16 1 10 {path}")
    assert _positions(cmds) == [START, OTHER]
    assert cmds.count("go depth 10") == 2


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        setup_bench(START, f"16 1 13 {tmp_path / 'absent.fen'}")