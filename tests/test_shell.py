import io
import os
import signal
import subprocess
import sys

from minishell.shell import Shell, main


def make_shell(*externals):
    out = io.StringIO()
    return Shell(externals, stdout=out), out


def test_ps1_changes_prompt():
    shell, out = make_shell()
    assert shell.handle_line("PS1=abc> ") is True
    assert shell.prompt == "abc> "
    assert out.getvalue() == ""


def test_ps1_with_space_is_not_a_prompt_change():
    shell, out = make_shell()
    shell.handle_line("PS1= x")
    assert shell.prompt == "minishell$: "
    assert "type --> NO_COMMAND" in out.getvalue()


def test_unknown_command_message():
    shell, out = make_shell()
    shell.handle_line("frobnicate now")
    assert out.getvalue() == "\x1b[36mcmd --> frobnicate   type --> NO_COMMAND\n\x1b[0m"


def test_pwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    shell, out = make_shell()
    shell.handle_line("pwd")
    assert out.getvalue() == os.getcwd() + "\n"


def test_cd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "sub").mkdir()
    shell, out = make_shell()
    shell.handle_line("cd sub")
    assert os.path.samefile(os.getcwd(), tmp_path / "sub")
    assert out.getvalue() == os.getcwd() + "\n"


def test_cd_to_missing_directory_stays(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    shell, out = make_shell()
    assert shell.handle_line("cd nowhere") is True
    assert os.path.samefile(os.getcwd(), tmp_path)
    assert out.getvalue() == os.getcwd() + "\n"


def test_echo_pid():
    shell, out = make_shell()
    shell.handle_line("echo $$")
    assert out.getvalue() == f"{os.getpid()}\n"


def test_echo_shell(monkeypatch):
    monkeypatch.setenv("SHELL", "/bin/sh")
    shell, out = make_shell()
    shell.handle_line("echo $SHELL")
    assert out.getvalue() == "/bin/sh\n"


def test_fg_and_bg_without_jobs():
    shell, out = make_shell()
    shell.handle_line("fg")
    shell.handle_line("bg")
    assert out.getvalue() == (
        "-bash: fg: current: no such job\n-bash: bg: current: no such job\n"
    )


def test_exit_stops_loop():
    shell, _ = make_shell()
    assert shell.handle_line("exit") is False


def test_external_syntax_error(capfd):
    shell, _ = make_shell("ls")
    shell.handle_line("ls |")
    assert "syntax error" in capfd.readouterr().err
    assert shell.status == 1


def test_jobs_and_fg_resume_stopped_process():
    proc = subprocess.Popen(["sleep", "0.2"])
    os.kill(proc.pid, signal.SIGSTOP)
    _, raw = os.waitpid(proc.pid, os.WUNTRACED)
    assert os.WIFSTOPPED(raw)
    shell, out = make_shell()
    shell.jobs.push(proc.pid, "sleep 0.2")
    shell.handle_line("jobs")
    assert out.getvalue() == f"[1][pid:{proc.pid}]    Stopped    sleep 0.2\n"
    shell.handle_line("fg")
    assert len(shell.jobs) == 0
    assert shell.status == 0
    proc.returncode = 0


def test_run_reads_until_exit():
    shell, out = make_shell()
    assert shell.run(io.StringIO("PS1=x> \nexit\n")) == 0
    assert out.getvalue() == "\nminishell$: \nx> "


def test_run_returns_status_at_end_of_input():
    shell, out = make_shell("false")
    assert shell.run(io.StringIO("false\n")) == 1
    assert out.getvalue().count("minishell$: ") == 2


def test_main_runs_until_exit(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "ext_commands.txt").write_text("ls\n")
    monkeypatch.setattr(sys, "stdin", io.StringIO("nothing\nexit\n"))
    saved = {s: signal.getsignal(s) for s in (signal.SIGINT, signal.SIGTSTP, signal.SIGCHLD)}
    try:
        assert main([]) == 0
    finally:
        for signum, previous in saved.items():
            signal.signal(signum, previous)
    assert "cmd --> nothing   type --> NO_COMMAND" in capsys.readouterr().out