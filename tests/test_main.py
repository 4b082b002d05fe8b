"""Command-line replay: exit codes and JSON output."""

import json

import main


class TestMain:

    def test_json_snapshot(self, asset_file, capsys):
        assert main.main([str(asset_file), "--action-id", "200", "--frame", "5", "--json"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["frame"] == 5
        assert out["summary"]["action_id"] == 200
        assert [t["action"] for t in out["triggers"]] == [600, 601, 603, 700]
        assert out["attack"][0]["boxes"] == [{"x": 40.0, "y": 50.0, "width": 10.0, "height": 5.0}]
        assert out["kinematics"]["position"] == [6.0, 0.0, 0.0]

    def test_text_output(self, asset_file, capsys):
        assert main.main([str(asset_file), "--action", "1", "--frame", "3"]) == 0
        out = capsys.readouterr().out
        assert "Action #1: 17" in out
        assert "Loop count: infinite" in out

    def test_frame_clamped(self, asset_file, capsys):
        assert main.main([str(asset_file), "--frame", "99", "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["frame"] == 10

    def test_missing_asset(self, tmp_path, capsys):
        assert main.main([str(tmp_path / "missing.json")]) == 1
        assert "could not load" in capsys.readouterr().err

    def test_unknown_action_id(self, asset_file, capsys):
        assert main.main([str(asset_file), "--action-id", "4242"]) == 1
        assert "no action with id 4242" in capsys.readouterr().err

    def test_action_index_out_of_range(self, asset_file, capsys):
        assert main.main([str(asset_file), "--action", "7"]) == 1
        assert "out of range" in capsys.readouterr().err
