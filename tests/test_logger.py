import io
import json
import unittest
from contextlib import redirect_stderr

from optionalpy import ConsoleLogger, Optional


class TestConsoleLogger(unittest.TestCase):
    def test_level_filtering(self):
        logger = ConsoleLogger(level="WARN")
        buf = io.StringIO()
        with redirect_stderr(buf):
            logger.info("hidden")
            logger.error("shown")
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertIn("optionalpy ERROR: shown", lines[0])

    def test_bind_and_json(self):
        logger = ConsoleLogger(json_output=True).bind(component="lookup")
        buf = io.StringIO()
        with redirect_stderr(buf):
            logger.info("hello", user="u1")
        rec = json.loads(buf.getvalue())
        self.assertEqual(rec["level"], "INFO")
        self.assertEqual(rec["msg"], "hello")
        self.assertEqual(rec["fields"], {"component": "lookup", "user": "u1"})

    def test_set_level(self):
        logger = ConsoleLogger()
        logger.set_level("debug")
        self.assertEqual(logger.level_name, "DEBUG")
        logger.set_level("bogus")
        self.assertEqual(logger.level_name, "DEBUG")


class TestLogOptional(unittest.TestCase):
    def test_logs_present_and_empty(self):
        logger = ConsoleLogger(level="DEBUG", json_output=True)
        buf = io.StringIO()
        present = Optional.of(7)
        with redirect_stderr(buf):
            self.assertIs(logger.optional("port", present), present)
            self.assertIs(logger.optional("host", Optional.empty()), Optional.empty())
        recs = [json.loads(l) for l in buf.getvalue().strip().splitlines()]
        self.assertEqual(recs[0]["msg"], "port: present")
        self.assertEqual(recs[0]["fields"], {"value": 7})
        self.assertEqual(recs[1]["msg"], "host: empty")
        self.assertNotIn("fields", recs[1])

    def test_unknown_level_raises(self):
        logger = ConsoleLogger(level="DEBUG")
        buf = io.StringIO()
        with redirect_stderr(buf):
            with self.assertRaises(ValueError) as cm:
                logger.optional("x", Optional.of(1), level="trace")
            with self.assertRaises(ValueError):
                logger.optional("x", Optional.empty(), level="trace")
        self.assertIn("TRACE", str(cm.exception))
        self.assertEqual(buf.getvalue(), "")

    def test_below_level_is_silent(self):
        logger = ConsoleLogger(level="INFO")
        buf = io.StringIO()
        with redirect_stderr(buf):
            r = Optional.of("x").map(str.upper)
            logger.optional("name", r)
        self.assertEqual(buf.getvalue(), "")
        self.assertEqual(r.get(), "X")


if __name__ == "__main__":
    unittest.main()
