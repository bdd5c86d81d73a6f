# SPDX-License-Identifier: MIT

from eyehabit.cleanup import register_cleanup
from eyehabit.initialize import initialize
from eyehabit.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
