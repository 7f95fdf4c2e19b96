import re
import threading
import unittest

from htmlhelper.ids import IdGenerator, default_generator, next_id
from htmlhelper.settings import configure, reset_settings


class NextIdTest(unittest.TestCase):
    def test_ids_differ_on_each_call(self) -> None:
        id1 = next_id()
        id2 = next_id()

        self.assertNotEqual(id1, id2)
        self.assertRegex(id1, r"^auto-id-\d+$")
        self.assertRegex(id2, r"^auto-id-\d+$")

    def test_counter_starts_at_one_and_resets(self) -> None:
        generator = IdGenerator(prefix="abc_")
        self.assertEqual(generator.next_id(), "abc_1")
        self.assertEqual(generator.next_id(), "abc_2")
        generator.reset()
        self.assertEqual(generator.next_id(), "abc_1")

    def test_default_generator_backs_next_id(self) -> None:
        default_generator().reset()
        self.assertEqual(next_id(), "auto-id-1")

    def test_prefix_follows_settings(self) -> None:
        configure(id_prefix="widget-")
        try:
            self.assertTrue(IdGenerator().next_id().startswith("widget-"))
        finally:
            reset_settings()

    def test_ids_are_unique_across_threads(self) -> None:
        generator = IdGenerator(prefix="t")
        seen: list[str] = []
        lock = threading.Lock()

        def worker() -> None:
            ids = [generator.next_id() for _ in range(500)]
            with lock:
                seen.extend(ids)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(seen), 4000)
        self.assertEqual(len(set(seen)), 4000)
        self.assertTrue(all(re.fullmatch(r"t\d+", value) for value in seen))


if __name__ == "__main__":
    unittest.main()
