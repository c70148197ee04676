"""Tests for the per-root pipeline and the print/check/update modes."""

import io

import pytest

from depaware.drift import apply_mode, unified_diff
from depaware.errors import ConfigError, LoaderError, MissingBaselineError, ResolutionError
from depaware.loader import StaticLoader
from depaware.models import AuditConfig, Mode
from depaware.pipeline import process, run

ROOT = "example.com/app"
TARGETS = ("linux", "windows")


def _loader(pkg_dir, extra_windows=False):
    windows = {ROOT: ["fmt"], "fmt": []}
    if extra_windows:
        windows = {ROOT: ["fmt", "golang.org/x/sys/windows"], "fmt": [], "golang.org/x/sys/windows": []}
    return StaticLoader(
        {"linux": {ROOT: ["fmt"], "fmt": []}, "windows": windows},
        dirs={ROOT: pkg_dir},
    )


def _config(mode=Mode.PRINT, **kwargs):
    return AuditConfig(mode=mode, targets=TARGETS, **kwargs)


class TestConfig:
    def test_from_options(self):
        config = AuditConfig.from_options(check=True, goos="linux, darwin", tags="a,b")
        assert config.mode is Mode.CHECK
        assert config.targets == ("linux", "darwin")
        assert config.tags == ("a", "b")
        assert config.file_name == "depaware.txt"

    def test_defaults(self):
        config = AuditConfig.from_options()
        assert config.mode is Mode.PRINT
        assert config.targets == ("linux", "darwin", "windows")
        assert config.tags == ()

    def test_check_and_update_conflict(self):
        with pytest.raises(ConfigError, match="can't be used together"):
            AuditConfig.from_options(check=True, update=True)

    @pytest.mark.parametrize("goos", ["", "linux,,darwin", ","])
    def test_bad_target_list(self, goos):
        with pytest.raises(ConfigError):
            AuditConfig.from_options(goos=goos)

    def test_frozen(self):
        config = AuditConfig()
        with pytest.raises(AttributeError):
            config.mode = Mode.CHECK


class TestProcess:
    def test_renders_and_locates_snapshot(self, tmp_path):
        result = process(ROOT, _loader(tmp_path), _config())
        assert result.package_dir == tmp_path
        assert result.previous is None
        assert result.dependency_count == 1
        assert result.rendered.startswith(f"{ROOT} dependencies:".encode())

    def test_previous_snapshot_read(self, tmp_path):
        (tmp_path / "depaware.txt").write_bytes(b"old")
        result = process(ROOT, _loader(tmp_path), _config())
        assert result.previous == b"old"

    def test_loader_failure_aborts(self, tmp_path):
        config = AuditConfig(targets=("linux", "plan9"))
        with pytest.raises(LoaderError, match="plan9"):
            process(ROOT, _loader(tmp_path), config)

    def test_no_go_files(self):
        loader = StaticLoader({"linux": {ROOT: []}, "windows": {ROOT: []}})
        with pytest.raises(ResolutionError, match="no .go files found"):
            process(ROOT, loader, _config())


class TestModes:
    def test_print(self, tmp_path):
        out = io.StringIO()
        status = run([ROOT], _loader(tmp_path), _config(), stdout=out)
        assert status == 0
        assert out.getvalue().encode() == process(ROOT, _loader(tmp_path), _config()).rendered
        assert not (tmp_path / "depaware.txt").exists()

    def test_print_separates_roots(self, tmp_path):
        out = io.StringIO()
        run([ROOT, ROOT], _loader(tmp_path), _config(), stdout=out)
        single = process(ROOT, _loader(tmp_path), _config()).rendered.decode()
        assert out.getvalue() == single + "\n" + single

    def test_update_creates_then_check_passes(self, tmp_path):
        assert run([ROOT], _loader(tmp_path), _config(Mode.UPDATE)) == 0
        written = (tmp_path / "depaware.txt").read_bytes()
        assert written == process(ROOT, _loader(tmp_path), _config()).rendered

        err = io.StringIO()
        assert run([ROOT], _loader(tmp_path), _config(Mode.CHECK), stderr=err) == 0
        assert err.getvalue() == ""

    def test_update_twice_same_bytes(self, tmp_path):
        run([ROOT], _loader(tmp_path, extra_windows=True), _config(Mode.UPDATE))
        first = (tmp_path / "depaware.txt").read_bytes()
        run([ROOT], _loader(tmp_path, extra_windows=True), _config(Mode.UPDATE))
        assert (tmp_path / "depaware.txt").read_bytes() == first

    def test_check_one_character_drift(self, tmp_path):
        run([ROOT], _loader(tmp_path), _config(Mode.UPDATE))
        path = tmp_path / "depaware.txt"
        path.write_bytes(path.read_bytes().replace(b"fmt", b"fmu"))

        err = io.StringIO()
        assert run([ROOT], _loader(tmp_path), _config(Mode.CHECK), stderr=err) == 1
        text = err.getvalue()
        assert f"The list of dependencies in {path} is out of date." in text
        assert "--- before" in text
        assert "+++ after" in text
        assert path.read_bytes().count(b"fmu") == 1

    def test_check_new_dependency(self, tmp_path):
        run([ROOT], _loader(tmp_path), _config(Mode.UPDATE))
        err = io.StringIO()
        assert run([ROOT], _loader(tmp_path, extra_windows=True), _config(Mode.CHECK), stderr=err) == 1
        added = [l for l in err.getvalue().splitlines() if l.startswith("+") and not l.startswith("+++")]
        assert len(added) == 1
        assert added[0].startswith("+   W    golang.org/x/sys/windows")

    def test_check_without_baseline(self, tmp_path):
        with pytest.raises(MissingBaselineError, match="cannot read"):
            run([ROOT], _loader(tmp_path), _config(Mode.CHECK))

    def test_check_colored_diff(self, tmp_path):
        run([ROOT], _loader(tmp_path), _config(Mode.UPDATE))
        result = process(ROOT, _loader(tmp_path, extra_windows=True), _config(color=True))
        err = io.StringIO()
        report = apply_mode(result, _config(Mode.CHECK, color=True), stderr=err)
        assert report.drifted
        assert "\x1b[32m" in err.getvalue()


def test_unified_diff():
    diff = unified_diff(b"a\nb\n", b"a\nc")
    assert diff.splitlines() == ["--- before", "+++ after", "@@ -1,2 +1,2 @@", " a", "-b", "+c"]
    assert unified_diff(b"same\n", b"same\n") == ""
