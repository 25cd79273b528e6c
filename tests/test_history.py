import unittest
from dataclasses import FrozenInstanceError

from termchat import MessageStore, Role, Turn


class TestTurn(unittest.TestCase):
    def test_wire_format(self):
        self.assertEqual(Turn.user("hello").as_message(), {"role": "user", "content": "hello"})
        self.assertEqual(
            Turn.assistant("hi").as_message(), {"role": "assistant", "content": "hi"}
        )

    def test_turn_is_immutable(self):
        turn = Turn.user("hello")
        with self.assertRaises(FrozenInstanceError):
            turn.content = "changed"


class TestMessageStore(unittest.TestCase):
    def test_append_keeps_order(self):
        store = MessageStore()
        store.append(Turn.user("one"))
        store.append(Turn.assistant("two"))
        store.append(Turn.user("three"))

        self.assertEqual(len(store), 3)
        self.assertEqual([t.content for t in store], ["one", "two", "three"])

    def test_snapshot_is_point_in_time(self):
        store = MessageStore()
        store.append(Turn.user("one"))
        snapshot = store.snapshot()

        store.append(Turn.assistant("two"))

        self.assertEqual(snapshot, (Turn.user("one"),))
        self.assertEqual(len(store.snapshot()), 2)

    def test_rejects_non_turns(self):
        store = MessageStore()
        with self.assertRaises(TypeError):
            store.append({"role": "user", "content": "hello"})
        self.assertEqual(len(store), 0)

    def test_role_values(self):
        self.assertEqual(Role.USER.value, "user")
        self.assertEqual(Role.ASSISTANT.value, "assistant")
