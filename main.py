import sys

from tictactoe_score.app import run

if __name__ == '__main__':
    sys.exit(run())
