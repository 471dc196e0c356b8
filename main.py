# main.py
import argparse
import sys

from runners.run_snake import main as snake

def parse_args():
    p = argparse.ArgumentParser(description="Snake in the terminal. WASD or arrow keys, SPACE pauses, Q quits.")
    return p.parse_args()

def main():
    parse_args()
    sys.exit(snake())

if __name__ == "__main__":
    main()
