import argparse
import sys
import os
import shutil
import logging

# Ensure project root is in path so we can import 'text_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from text_maze import config

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Text Maze: perfect maze generator with a text collision map")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate and print a new maze")
    gen_parser.add_argument("--width", type=int, default=config.DEFAULT_WIDTH, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=config.DEFAULT_HEIGHT, help="Maze Height")
    gen_parser.add_argument("--size", type=str, help="Maze size as '<width> x <height>' (overrides --width/--height)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--save", action="store_true", help="Save as a new session, cursor at the entrance")
    gen_parser.add_argument("--sessions", type=str, default=config.SESSIONS_DIR, help="Sessions folder")
    gen_parser.add_argument("--stats", action="store_true", help="Log maze statistics")
    gen_parser.add_argument("--fit", action="store_true", help="Shrink the maze to fit the terminal")

    # Move Command
    move_parser = subparsers.add_parser("move", help="Apply moves to a saved session")
    move_parser.add_argument("session_id", help="Saved session id (see 'list')")
    move_parser.add_argument("moves", help="Moves to apply, e.g. 'DDRRU' (U/D/L/R)")
    move_parser.add_argument("--sessions", type=str, default=config.SESSIONS_DIR, help="Sessions folder")

    # List Command
    list_parser = subparsers.add_parser("list", help="List saved sessions")
    list_parser.add_argument("--sessions", type=str, default=config.SESSIONS_DIR, help="Sessions folder")

    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("text_maze")

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    if args.command == "generate":
        from text_maze.algo.frontier import generate
        from text_maze.viz.text_renderer import render

        width, height = args.width, args.height
        if args.size:
            try:
                width, height = config.parse_size(args.size)
            except ValueError as e:
                logger.error(f"Invalid maze size: {e}")
                return 1
        if width < config.MIN_WIDTH or height < config.MIN_HEIGHT:
            logger.error(f"Maze size must be at least {config.MIN_WIDTH}x{config.MIN_HEIGHT}, got {width}x{height}")
            return 1
        if args.fit:
            cols, rows = shutil.get_terminal_size()
            width, height = config.clamp_to_view(width, height, cols, rows)

        logger.info(f"Generating {width}x{height} maze...")
        grid = generate(width, height, seed=args.seed)
        buffer = render(grid)
        print(buffer.text, end="")

        if args.stats:
            from text_maze.core.complexity import MazeStats
            logger.info(f"Stats: {MazeStats.calculate_stats(grid)}")

        if args.save:
            from text_maze.core.navigator import entrance_cursor
            from text_maze.io.session import Session, SessionStore
            store = SessionStore(args.sessions)
            session = Session(buffer, entrance_cursor(buffer), store.new_session_id())
            store.save(session, force=True)
            print(f"Session: {session.session_id}")

    elif args.command == "move":
        from text_maze.core.errors import BufferDesyncError
        from text_maze.core.navigator import KEYS, at_exit, try_move
        from text_maze.io.session import SessionStore

        store = SessionStore(args.sessions)
        try:
            session = store.load(args.session_id)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load session {args.session_id}: {e}")
            return 1

        cursor = session.cursor
        for key in args.moves.upper():
            if key not in KEYS:
                logger.warning(f"Ignoring unknown move {key!r}")
                continue
            try:
                moved = try_move(session.buffer, cursor, KEYS[key])
            except BufferDesyncError as e:
                logger.error(f"{e}. Restart the game.")
                return 2
            if moved is None:
                print(f"{KEYS[key]:<5} blocked at ({cursor.col}, {cursor.row})")
            else:
                cursor = moved
                print(f"{KEYS[key]:<5} -> ({cursor.col}, {cursor.row})")

        session.cursor = cursor
        store.save(session, force=True)
        if at_exit(session.buffer, cursor):
            print("Exit reached!")

    elif args.command == "list":
        from text_maze.io.session import SessionStore
        sessions = SessionStore(args.sessions).list_sessions()
        if not sessions:
            logger.info(f"There are no saved sessions in {args.sessions}")
        for name in sessions:
            print(name)

    return 0

if __name__ == "__main__":
    sys.exit(main())
