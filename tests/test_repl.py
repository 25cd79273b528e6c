from unittest.mock import patch

import httpx
import openai

from termchat import ProviderKind, Role, Turn

from .test_base import BaseTermChatTest, make_completion


class TestREPL(BaseTermChatTest):
    @patch("builtins.input")
    def test_repl_basic_interaction(self, mock_input):
        """Send one message and quit"""
        mock_input.side_effect = ["hello", "/quit"]
        self.mock_client.chat.completions.create.return_value = make_completion("hi")

        self.chat_cli.repl()

        self.assertEqual(
            self.session.history.snapshot(), (Turn.user("hello"), Turn.assistant("hi"))
        )
        output = self.printed()
        self.assertIn("Welcome to the AI Chat Terminal!", output)
        self.assertIn("AI: hi", output)
        self.assertTrue(output.rstrip().endswith("Bye."))

    @patch("builtins.input")
    def test_repl_with_commands(self, mock_input):
        """Messages on both providers share one history"""
        mock_input.side_effect = ["Hello", "/switch", "How are you?", "/quit", "never read"]
        self.mock_client.chat.completions.create.side_effect = [
            make_completion("Hi there!"),
            make_completion("I'm doing well!"),
        ]

        self.chat_cli.repl()

        self.assertIs(self.session.provider, ProviderKind.OLLAMA)
        self.assertEqual(len(self.session.history), 4)
        self.assertEqual(len(self.sent_messages(-1)), 3)
        self.assertEqual(mock_input.call_count, 4)

    @patch("builtins.input")
    def test_end_of_input_quits(self, mock_input):
        mock_input.side_effect = ["hello", EOFError]
        self.mock_client.chat.completions.create.return_value = make_completion("hi")

        self.chat_cli.repl()

        self.assertEqual(len(self.session.history), 2)
        self.assertIn("Bye.", self.printed())

    @patch("builtins.input")
    def test_transport_failure_does_not_stop_loop(self, mock_input):
        """A failed request is reported and the next line is still handled"""
        mock_input.side_effect = ["hello", "again", "/quit"]
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        self.mock_client.chat.completions.create.side_effect = [
            openai.APIConnectionError(request=request),
            make_completion("back online"),
        ]

        self.chat_cli.repl()

        roles = [turn.role for turn in self.session.history]
        self.assertEqual(roles, [Role.USER, Role.USER, Role.ASSISTANT])
        self.assertEqual(self.session.history.snapshot()[0], Turn.user("hello"))
        output = self.printed()
        self.assertIn("Error: Could not reach OpenAI", output)
        self.assertIn("AI: back online", output)

    @patch("builtins.input")
    def test_zero_choices_reported(self, mock_input):
        mock_input.side_effect = ["hello", "/quit"]
        self.mock_client.chat.completions.create.return_value = make_completion()

        self.chat_cli.repl()

        self.assertIn("Error: Provider returned no choices", self.printed())
        self.assertEqual(self.session.history.snapshot(), (Turn.user("hello"),))
