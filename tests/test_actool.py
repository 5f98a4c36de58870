from types import SimpleNamespace

from tauri_liquid_icon import actool


def test_build_compile_command_template() -> None:
    cmd = actool.build_compile_command("/p/Icon.icon", "/p/out", "AppIcon", "10.13")
    assert cmd[:5] == ["xcrun", "actool", "/p/Icon.icon", "--compile", "/p/out"]
    assert "--output-partial-info-plist" in cmd
    assert cmd[cmd.index("--output-partial-info-plist") + 1] == (
        "/p/out/assetcatalog_generated_info.plist"
    )
    assert cmd[cmd.index("--app-icon") + 1] == "AppIcon"
    assert cmd[cmd.index("--enable-on-demand-resources") + 1] == "NO"
    assert cmd[cmd.index("--target-device") + 1] == "mac"
    assert cmd[cmd.index("--minimum-deployment-target") + 1] == "10.13"
    assert cmd[-2:] == ["--platform", "macosx"]
    for flag in ("--notices", "--warnings", "--errors", "--include-all-app-icons"):
        assert flag in cmd


def test_run_raises_runtime_error_on_failure(monkeypatch) -> None:
    def fake_run(_cmd, capture_output=False, check=False):
        _ = (capture_output, check)
        return SimpleNamespace(returncode=1, stdout=b"", stderr=b"boom")

    monkeypatch.setattr(actool.subprocess, "run", fake_run)

    try:
        actool._run(["xcrun", "actool"])
        assert False, "expected RuntimeError"
    except RuntimeError as e:
        msg = str(e)
        assert "Command failed" in msg
        assert "boom" in msg


def test_run_reports_stdout_when_stderr_empty(monkeypatch) -> None:
    monkeypatch.setattr(
        actool.subprocess,
        "run",
        lambda _cmd, **_kw: SimpleNamespace(
            returncode=255, stdout=b"error: The file couldn't be opened.", stderr=b""
        ),
    )

    try:
        actool._run(["xcrun", "actool"])
        assert False, "expected RuntimeError"
    except RuntimeError as e:
        assert "couldn't be opened" in str(e)


def test_compile_icon_creates_output_and_uses_absolute_paths(monkeypatch, tmp_path, capsys) -> None:
    icon = tmp_path / "Icon.icon"
    icon.mkdir()
    output = tmp_path / "nested" / "resources"
    monkeypatch.chdir(tmp_path)

    calls: list[list[str]] = []

    def fake_run(cmd: list[str], *, verbose: bool = False) -> str:
        _ = verbose
        calls.append(cmd)
        return "/* com.apple.actool.compilation-results */\n"

    ok = actool.compile_icon("Icon.icon", "nested/resources", "AppIcon", "14.0", run=fake_run)
    assert ok is True
    assert output.is_dir()
    assert calls[0][2] == str(icon)
    assert calls[0][4] == str(output)

    out = capsys.readouterr().out
    assert "Created output directory: nested/resources" in out
    assert "com.apple.actool.compilation-results" in out
    assert "Icon compiled successfully to nested/resources/Assets.car" in out


def test_compile_icon_uses_module_runner_by_default(monkeypatch, tmp_path) -> None:
    output = tmp_path / "out"
    output.mkdir()
    seen: dict = {}

    def fake_run(cmd: list[str], *, verbose: bool = False) -> str:
        seen["cmd"] = cmd
        seen["verbose"] = verbose
        return ""

    monkeypatch.setattr(actool, "_run", fake_run)

    assert actool.compile_icon(str(tmp_path / "A.icon"), str(output), "A", "26.0", verbose=True)
    assert seen["verbose"] is True
    assert seen["cmd"][seen["cmd"].index("--app-icon") + 1] == "A"


def test_compile_icon_failure_returns_false(tmp_path, capsys) -> None:
    def fake_run(cmd: list[str], *, verbose: bool = False) -> str:
        raise RuntimeError("Command failed: xcrun actool\nerror: bad icon")

    ok = actool.compile_icon(str(tmp_path / "A.icon"), str(tmp_path), "AppIcon", "10.13", run=fake_run)
    assert ok is False
    captured = capsys.readouterr()
    assert "Failed to compile icon with actool" in captured.out
    assert "error: bad icon" in captured.err


def test_compile_icon_missing_tool_returns_false(tmp_path) -> None:
    def fake_run(cmd: list[str], *, verbose: bool = False) -> str:
        raise FileNotFoundError(2, "No such file or directory", "xcrun")

    assert actool.compile_icon(str(tmp_path / "A.icon"), str(tmp_path), "AppIcon", "10.13", run=fake_run) is False


def test_run_reports_both_streams(monkeypatch) -> None:
    monkeypatch.setattr(
        actool.subprocess,
        "run",
        lambda _cmd, **_kw: SimpleNamespace(
            returncode=1,
            stdout=b"/* com.apple.actool.errors */\nIcon.icon: error: missing icon.json\n",
            stderr=b"xcrun: note: using developer dir\n",
        ),
    )

    try:
        actool._run(["xcrun", "actool"])
        assert False, "expected RuntimeError"
    except RuntimeError as e:
        msg = str(e)
        assert "error: missing icon.json" in msg
        assert "xcrun: note" in msg
