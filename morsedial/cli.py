# MorseDial - a few numbers pick a word, the word is flashed in Morse.

import argparse
import asyncio
import shlex
import signal
import sys
import threading
from typing import List, Optional

from .driver import RepeatDriver
from .logger import Log
from .selector import canonical_key, selection
from .sinks import CounterBank, StatusLine, TerminalLamp
from .words import WordList, find_dictionary

try:
    import readline
    HAS_READLINE = True
except ImportError:
    HAS_READLINE = False

DEFAULT_UNIT_MS = 250
DEFAULT_INPUTS = 5


class MorseDialCLI:
    def __init__(self, words: WordList, inputs: CounterBank, unit_ms: float = DEFAULT_UNIT_MS, lamp: bool = True):
        self.words = words
        self.inputs = inputs
        self.status = StatusLine()
        self.lamp = TerminalLamp(enabled=lamp)
        self.driver = RepeatDriver(
            vector_source=self.inputs.read,
            dictionary=self.words.words,
            unit_ms=unit_ms,
            visual_sink=self.lamp,
            diagnostic_sink=self.status
        )
        self.loop: Optional[asyncio.AbstractEventLoop] = None
        self.thread: Optional[threading.Thread] = None

    def start(self):
        # driver runs on its own loop, the shell keeps the main thread
        def run_driver():
            self.loop = asyncio.new_event_loop()
            asyncio.set_event_loop(self.loop)
            try:
                self.loop.run_until_complete(self.driver.run())
            finally:
                self.loop.close()

        self.thread = threading.Thread(target=run_driver, daemon=True)
        self.thread.start()

    def stop(self):
        self.driver.stop()
        if self.thread and self.thread is not threading.current_thread():
            self.thread.join(timeout=5)

    def _execute_command(self, command: str) -> bool:
        """Run one shell command. Returns False when the shell should exit."""
        if "#" in command:
            command = command.split("#", 1)[0]

        command = command.strip()
        if not command:
            return True

        try:
            cmd = shlex.split(command)
        except ValueError as e:
            Log.error(f"Invalid command syntax: {e}")
            return True

        name = cmd[0].lower()
        args = cmd[1:]

        try:
            if name == 'set':
                if len(args) < 2:
                    Log.error("Usage: set <input> <value>")
                    return True
                self.inputs.set(int(args[0]), args[1])
                self.show()

            elif name in ('inc', 'dec'):
                if len(args) < 1:
                    Log.error(f"Usage: {name} <input>")
                    return True
                self.inputs.change(int(args[0]), 1 if name == 'inc' else -1)
                self.show()

            elif name == 'reset':
                self.inputs.reset()
                self.status("reset")
                self.show()

            elif name == 'show':
                self.show()

            elif name == 'reload':
                self.words.reload()

            elif name == 'help':
                self.display_help()

            elif name == 'exit':
                return False

            else:
                Log.error(f"Unknown command: {name}")
                Log.info("Type 'help' for commands")

        except (ValueError, IndexError) as e:
            Log.error(str(e))

        return True

    def show(self):
        values = self.inputs.read()
        h, index = selection(values, len(self.words))
        Log.select(f"[{canonical_key(values)}] hash=0x{h:08x} ({h}) index={index}")

    def display_help(self):
        Log.section("Commands")

        Log.print("set <input> <value>", 'bright_green')
        Log.print(f"  Set an input (1-{self.inputs.size}) to a whole number", 'white')
        Log.print("  Example: set 2 42", 'cyan')
        Log.print("")

        Log.print("inc <input> / dec <input>", 'bright_green')
        Log.print("  Step an input up or down by one", 'white')
        Log.print("")

        Log.print("reset", 'bright_green')
        Log.print("  Set every input back to 0", 'white')
        Log.print("")

        Log.print("show", 'bright_green')
        Log.print("  Display the inputs, hash and selected index", 'white')
        Log.print("")

        Log.print("reload", 'bright_green')
        Log.print("  Read the word list again", 'white')
        Log.print("")

        Log.print("exit", 'bright_green')
        Log.print("  Exit the application", 'white')
        Log.print("")

    def interactive(self):
        Log.print("Type 'help' for commands", 'bright_yellow')

        try:
            while self.driver.running or self.thread.is_alive():
                try:
                    print()
                    cmd_input = input("\033[1;32mmorsedial  \033[0m ").strip()
                except KeyboardInterrupt:
                    Log.warning("Use 'exit' to exit")
                    continue
                except EOFError:
                    break

                if not self._execute_command(cmd_input):
                    break
        finally:
            self.stop()


async def run_daemon(driver: RepeatDriver):
    loop = asyncio.get_running_loop()

    def handle_signal(signum):
        Log.warning(f"Received signal {signum}, shutting down...")
        driver.stop()

    for signum in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(signum, handle_signal, signum)

    await driver.run()


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description='MorseDial')
    parser.add_argument('--dict', dest='dict_path', help='Word list (.csv, .json or one word per line). Defaults to dict.csv or dict.json')
    parser.add_argument('--unit', type=float, default=DEFAULT_UNIT_MS, help='Morse unit in milliseconds')
    parser.add_argument('--inputs', type=int, default=DEFAULT_INPUTS, help='Number of inputs')
    parser.add_argument('--values', nargs='+', default=None, help='Initial input values')
    parser.add_argument('--no-lamp', action='store_false', dest='lamp', help='Do not draw the lamp in the terminal')
    parser.add_argument('--daemon', action='store_true', help='Run in non-interactive daemon mode')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    Log.header("MorseDial")

    args = parse_args(argv)

    try:
        words = WordList(args.dict_path or find_dictionary())
        inputs = CounterBank(args.inputs, args.values)
        app = MorseDialCLI(words, inputs, unit_ms=args.unit, lamp=args.lamp)
    except ValueError as e:
        Log.error(str(e))
        sys.exit(1)

    words.reload()
    Log.info(f"Unit: {args.unit}ms, inputs: {inputs.size}")

    if args.daemon:
        Log.info("Press Ctrl+C to stop")
        asyncio.run(run_daemon(app.driver))
        return

    if HAS_READLINE:
        readline.parse_and_bind('set editing-mode emacs')

    app.start()
    app.interactive()


if __name__ == "__main__":
    main()
