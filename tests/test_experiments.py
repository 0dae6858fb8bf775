import csv

import pandas as pd
import pytest

from pathfinder.domains.puzzlen import SlidingPuzzle
from pathfinder.experiments import plot, runner, visualize_path


def read_rows(path):
    with open(path, newline="") as f:
        return list(csv.DictReader(f))


class TestRunnerHelpers:
    def test_make_unsolvable_variant_flips_parity(self):
        p = SlidingPuzzle(3)
        s = p.scramble(10, 1)
        u = runner.make_unsolvable_variant(s)
        assert sorted(u) == sorted(s)
        assert p.is_solvable(s) and not p.is_solvable(u)

    def test_gen_instances(self):
        p = SlidingPuzzle(3)
        insts = runner._gen(p.scramble, p.is_solvable, [4, 8], per_depth=3)
        assert len(insts) == 6
        assert [i.depth for i in insts] == [4, 4, 4, 8, 8, 8]
        assert all(p.is_solvable(i.state) for i in insts)

    def test_gen_gives_up(self):
        with pytest.raises(RuntimeError):
            runner._gen(lambda d, s: (2, 1, 3, 0), lambda s: False, [1], per_depth=1)

    @pytest.mark.parametrize("argv,label,shape", [
        ([], "p8", (3, 3)),
        (["--domain", "p15"], "p15", (4, 4)),
        (["--n", "5"], "n5", (5, 5)),
        (["--rows", "3", "--cols", "4", "--n", "5"], "r3x4", (3, 4)),
    ])
    def test_choose_domain(self, argv, label, shape):
        args = runner.build_parser().parse_args(argv)
        name, dom = runner.choose_domain(args)
        assert name == label
        assert (dom.R, dom.C) == shape

    def test_selected_algos(self):
        assert runner.selected_algos("all") == ["a", "a_approx", "bfs"]
        assert runner.selected_algos("a") == ["a"]


class TestRunnerMain:
    def test_puzzle_csv(self, tmp_path, capsys):
        out = tmp_path / "res.csv"
        runner.main(["--rows", "2", "--cols", "3", "--depths", "4", "6", "--per_depth", "2", "--algo", "all",
                     "--include_unsolvable", "--out", str(out)])
        rows = read_rows(out)
        assert list(rows[0].keys()) == runner.HEADER
        # 4 instances x (solvable + unsolvable) x 3 algorithms
        assert len(rows) == 24
        solved = [r for r in rows if r["solvable"] == "1"]
        assert all(r["termination"] == "ok" for r in solved)
        unsolved = [r for r in rows if r["solvable"] == "0"]
        assert all(r["termination"] == "exhausted" and r["g"] == "" for r in unsolved)
        assert "Wrote" in capsys.readouterr().out

    def test_heightmap_csv(self, tmp_path, hill_file, capsys):
        out = tmp_path / "hill.csv"
        runner.main(["--heightmap", str(hill_file), "--algo", "a", "--out", str(out)])
        rows = read_rows(out)
        assert len(rows) == 1
        assert rows[0]["domain"] == "heightmap"
        assert rows[0]["g"] == "31"
        assert "A*: 31" in capsys.readouterr().out


class TestPlot:
    def test_summarize(self):
        df = pd.DataFrame({
            "algorithm": ["A*", "A*", "BFS"],
            "heuristic": ["manhattan"] * 3,
            "depth": [4, 4, 4],
            "expanded": [2, 4, 10],
            "generated": [5, 7, 20],
            "duplicates": [0, 1, 3],
            "peak_open": [3, 3, 8],
            "time_sec": [0.1, 0.3, 0.5],
            "termination": ["ok"] * 3,
        })
        s = plot.summarize(df)
        assert s.loc[("A*", "manhattan", 4), ("expanded", "mean")] == 3
        assert s.loc[("BFS", "manhattan", 4), ("expanded", "std")] == 0.0

    def test_load_drops_unfinished(self, tmp_path):
        out = tmp_path / "res.csv"
        runner.main(["--rows", "2", "--cols", "3", "--depths", "4", "--per_depth", "2", "--algo", "a",
                     "--include_unsolvable", "--out", str(out)])
        df = plot.load_results([out])
        assert len(df) == 2
        assert set(df["termination"]) == {"ok"}

    def test_main_writes_pngs(self, tmp_path):
        out = tmp_path / "res.csv"
        runner.main(["--depths", "4", "6", "--per_depth", "2", "--algo", "both", "--out", str(out)])
        save = tmp_path / "plots"
        plot.main([str(out), "--save", str(save)])
        assert (save / "res_combined.png").exists()
        assert (save / "res_summary.csv").exists()


class TestVisualizePath:
    def test_draws_image(self, tmp_path, hill_file):
        out = tmp_path / "figs" / "path.png"
        visualize_path.main([str(hill_file), "--out", str(out)])
        assert out.exists()
