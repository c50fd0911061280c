#!/usr/bin/env python3
"""Video Queue Bot tmux Launcher

Runs the bot in a detached tmux session so mpv keeps a home on the machine
driving the screen:
- start/stop/restart/attach/status/logs actions
- optional auto-restart loop (--respawn)
- output mirrored to a log file
"""

import argparse
import os
import shlex
import shutil
import subprocess
import sys
import time
from pathlib import Path

DEFAULT_SESSION = "video_queue_bot"
DEFAULT_LOG_FILE = "logs/video_queue_bot.log"
CONSOLE_SCRIPT = "discord-video-queue"
STARTUP_GRACE_SECONDS = 2.0


def default_command() -> str:
    """Prefer the installed console script, else run the package module directly."""
    if shutil.which(CONSOLE_SCRIPT):
        return CONSOLE_SCRIPT
    return f"{shlex.quote(sys.executable)} -m discord_video_queue.main"


def tmux(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(["tmux", *args], capture_output=True, text=True, check=False)


def session_running(session: str) -> bool:
    return tmux("has-session", "-t", session).returncode == 0


def fail(message: str, hint: str | None = None) -> None:
    print(f"[err] {message}")
    if hint:
        print(f"      {hint}")
    sys.exit(1)


def build_inner_command(cmd: str, log_path: Path, respawn: bool) -> str:
    """Build the shell line executed inside the tmux pane.

    The pane loads ``.env`` when present and keeps ``DISPLAY`` so the player
    can open a window on the attached screen.
    """
    prelude = "set -a; [ -f .env ] && . ./.env; set +a;"
    display = os.environ.get("DISPLAY")
    if display:
        prelude += f" export DISPLAY={shlex.quote(display)};"

    line = f"{prelude} {cmd} 2>&1 | tee -a {shlex.quote(str(log_path))}"
    if not respawn:
        return line
    return f'while true; do {line}; echo "[respawn] bot exited ($?), restarting"; sleep 2; done'


def start(session: str, cmd: str, respawn: bool, log_file: str | None) -> None:
    if session_running(session):
        print(f"[ok] '{session}' is already running (tmux attach -t {session})")
        return

    log_path = Path(log_file or DEFAULT_LOG_FILE)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    workdir = Path(__file__).resolve().parent
    res = tmux(
        "new-session", "-d", "-s", session, "-c", str(workdir),
        "bash", "-lc", build_inner_command(cmd, log_path, respawn),
    )
    if res.returncode != 0:
        fail(res.stderr.strip() or f"tmux could not create session '{session}'")

    time.sleep(STARTUP_GRACE_SECONDS)
    if not session_running(session):
        fail(f"'{session}' exited right after starting.", f"See {log_path}")

    print(f"[ok] '{session}' started")
    print(f"    attach:  tmux attach -t {session}")
    print("    logs:    python bot_start.py logs")


def stop(session: str) -> None:
    if not session_running(session):
        print(f"[ok] '{session}' is not running.")
        return

    res = tmux("kill-session", "-t", session)
    if res.returncode != 0:
        fail(res.stderr.strip() or f"tmux could not kill session '{session}'")
    print(f"[ok] '{session}' stopped.")


def attach(session: str) -> None:
    if not session_running(session):
        fail(f"'{session}' is not running.", "Start it with: python bot_start.py start")
    os.execvp("tmux", ["tmux", "attach-session", "-t", session])


def status(session: str) -> None:
    if not session_running(session):
        print(f"[status] '{session}': NOT RUNNING")
        sys.exit(1)

    print(f"[status] '{session}': RUNNING")
    res = tmux("list-panes", "-t", session, "-F", "#{pane_pid} #{pane_current_command}")
    for line in res.stdout.strip().splitlines() if res.returncode == 0 else []:
        pid, _, command = line.partition(" ")
        print(f"  pane pid {pid}: {command}")


def logs(log_file: str | None, lines: int) -> None:
    log_path = Path(log_file or DEFAULT_LOG_FILE)
    if not log_path.exists():
        fail(f"No log file at {log_path}")
    os.execvp("tail", ["tail", "-n", str(lines), "-f", str(log_path)])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the Discord video queue bot in tmux.")
    parser.add_argument("--session", "-s", default=DEFAULT_SESSION, help="tmux session name")
    parser.add_argument("--cmd", "-c", default=None, help="command that starts the bot")
    parser.add_argument("--log-file", "-l", default=None, help=f"default: {DEFAULT_LOG_FILE}")
    parser.add_argument("--respawn", action="store_true", help="restart the bot when it exits")
    parser.add_argument("--lines", "-n", type=int, default=50, help="lines shown by 'logs'")
    parser.add_argument(
        "action", choices=("start", "stop", "restart", "attach", "status", "logs")
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.action == "logs":
        logs(args.log_file, args.lines)
        return

    if shutil.which("tmux") is None:
        fail("tmux is not installed.", "Install with: apt install tmux  (or: brew install tmux)")

    session = args.session.strip().replace(" ", "_")
    cmd = (args.cmd or default_command()).strip()

    if args.action in ("stop", "restart"):
        stop(session)
    if args.action in ("start", "restart"):
        start(session, cmd, args.respawn, args.log_file)
    elif args.action == "attach":
        attach(session)
    elif args.action == "status":
        status(session)


if __name__ == "__main__":
    main()
