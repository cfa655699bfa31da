import unittest
import sys
import os
import shutil
import tempfile
from datetime import datetime

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from text_maze.algo.frontier import generate
from text_maze.core.errors import SessionFormatError
from text_maze.core.navigator import Cursor, entrance_cursor, try_move_down
from text_maze.io.session import Session, SessionStore
from text_maze.viz.text_renderer import render

class TestSessionStore(unittest.TestCase):
    def setUp(self):
        self.out_dir = tempfile.mkdtemp(prefix="text_maze_")
        self.sessions = os.path.join(self.out_dir, "savedsessions")
        self.buffer = render(generate(6, 5, seed=10))

    def tearDown(self):
        shutil.rmtree(self.out_dir, ignore_errors=True)

    def test_round_trip(self):
        store = SessionStore(self.sessions)
        session = Session(self.buffer, Cursor(7, 3), "2021-11-22 10H.05M.07S")
        self.assertTrue(store.save(session))

        loaded = store.load(session.session_id)
        self.assertEqual(loaded.cursor, Cursor(7, 3))
        self.assertEqual(loaded.buffer, self.buffer)
        self.assertEqual(loaded.session_id, session.session_id)

    def test_file_layout(self):
        store = SessionStore(self.sessions)
        session = Session(self.buffer, entrance_cursor(self.buffer), "layout")
        store.save(session)

        with open(os.path.join(self.sessions, "layout"), encoding="utf-8") as f:
            content = f.read()
        header, _, body = content.partition("\n")
        self.assertEqual(header, "7 0")
        self.assertEqual(body, self.buffer.text)

    def test_loaded_buffer_is_playable(self):
        store = SessionStore(self.sessions)
        start = entrance_cursor(self.buffer)
        store.save(Session(self.buffer, start, "play"))

        loaded = store.load("play")
        self.assertEqual(try_move_down(loaded.buffer, loaded.cursor),
                         try_move_down(self.buffer, start))

    def test_save_throttle(self):
        store = SessionStore(self.sessions, interval=3600)
        session = Session(self.buffer, Cursor(7, 0), "throttled")
        self.assertTrue(store.save(session))

        session.cursor = Cursor(7, 1)
        self.assertFalse(store.save(session))
        self.assertEqual(store.load("throttled").cursor, Cursor(7, 0))

        self.assertTrue(store.save(session, force=True))
        self.assertEqual(store.load("throttled").cursor, Cursor(7, 1))

    def test_no_throttle(self):
        store = SessionStore(self.sessions, interval=0)
        session = Session(self.buffer, Cursor(7, 0), "free")
        self.assertTrue(store.save(session))
        self.assertTrue(store.save(session))

    def test_malformed_header(self):
        os.makedirs(self.sessions)
        for name, header in [("short", "12\n"), ("long", "1 2 3\n"), ("text", "x y\n"), ("empty", "")]:
            with open(os.path.join(self.sessions, name), "w", encoding="utf-8") as f:
                f.write(header + self.buffer.text)
            with self.subTest(header=header):
                with self.assertRaises(SessionFormatError):
                    SessionStore(self.sessions).load(name)
                with self.assertRaises(ValueError):
                    SessionStore(self.sessions).load(name)

    def test_missing_session(self):
        with self.assertRaises(FileNotFoundError):
            SessionStore(self.sessions).load("nope")

    def test_list_sessions(self):
        store = SessionStore(self.sessions, interval=0)
        self.assertEqual(store.list_sessions(), [])

        for sid in ("b", "a", "c"):
            store.save(Session(self.buffer, Cursor(7, 0), sid))
        self.assertEqual(store.list_sessions(), ["a", "b", "c"])

    def test_session_id(self):
        sid = SessionStore.new_session_id(datetime(2021, 11, 22, 10, 5, 7))
        self.assertEqual(sid, "2021-11-22 10H.05M.07S")

if __name__ == '__main__':
    unittest.main()
