import unittest

from friendly_words.collection import WordCollection
from friendly_words.errors import IngestionFailed
from friendly_words.ingest import (
    InvalidNamePolicy,
    WordFile,
    WordSet,
    ingest,
    ingest_file,
    ingest_texts,
)
from friendly_words.issues import EmptySource, InvalidName, InvalidWord, ValidationIssue


class EndToEndScenarioTests(unittest.TestCase):
    def test_valid_file_produces_word_set(self) -> None:
        result = ingest([WordFile.from_text("test", "foo\nbar")])

        self.assertEqual(result.issues, ())
        self.assertEqual(
            result.word_sets,
            (WordSet(property_name="Test", words=("foo", "bar"), source_name="test"),),
        )
        collection = WordCollection(result.word_sets[0].words)
        self.assertEqual(collection.of_length(3), ("foo", "bar"))
        self.assertEqual(collection.count(), 1)

    def test_invalid_name_produces_no_word_set(self) -> None:
        result = ingest([WordFile.from_text("te#9st", "foo\nbar")])

        self.assertEqual(result.word_sets, ())
        self.assertEqual(result.issues, (InvalidName(name="te#9st"),))
        self.assertTrue(result.has_errors)

    def test_invalid_word_is_dropped_and_reported(self) -> None:
        result = ingest([WordFile.from_text("test", "foo\nb@r")])

        self.assertEqual(len(result.word_sets), 1)
        self.assertEqual(result.word_sets[0].words, ("foo",))
        self.assertEqual(len(result.issues), 1)
        issue = result.issues[0]
        self.assertIsInstance(issue, InvalidWord)
        self.assertEqual(issue.word, "b@r")
        self.assertEqual(issue.source_name, "test")
        self.assertEqual(issue.line, 2)

    def test_blank_source_is_skipped_with_warning(self) -> None:
        for text in ("", "   ", "\n\n", " \t\r\n "):
            with self.subTest(text=text):
                result = ingest([WordFile.from_text("blank", text)])
                self.assertEqual(result.word_sets, ())
                self.assertEqual(result.issues, (EmptySource(source_name="blank"),))
                self.assertFalse(result.has_errors)
                self.assertEqual(len(result.warnings), 1)


class IngestionTests(unittest.TestCase):
    def test_order_of_word_sets_follows_input(self) -> None:
        result = ingest_texts(
            [("zebra", "stripe"), ("apple", "core"), ("bad1", "x"), ("mango", "pit")]
        )
        self.assertEqual(
            [ws.property_name for ws in result.word_sets], ["Zebra", "Apple", "Mango"]
        )

    def test_all_invalid_words_reported_not_just_first(self) -> None:
        result = ingest_texts([("nouns", "cat\n1\ndog\nx y\n\nowl")])
        self.assertEqual(result.word_sets[0].words, ("cat", "dog", "owl"))
        self.assertEqual(
            [(i.word, i.line) for i in result.issues],
            [("1", 2), ("x y", 4), ("", 5)],
        )

    def test_lines_are_not_stripped(self) -> None:
        result = ingest_texts([("nouns", "cat \r\ndog")])
        self.assertEqual(result.word_sets[0].words, ("dog",))
        self.assertEqual(result.issues[0].word, "cat ")

    def test_form_feed_and_vertical_tab_do_not_split_lines(self) -> None:
        result = ingest_texts([("nouns", "foo\x0cbar\nbaz\x0bqux\ncat")])
        self.assertEqual(result.word_sets[0].words, ("cat",))
        self.assertEqual(
            [(i.word, i.line) for i in result.issues],
            [("foo\x0cbar", 1), ("baz\x0bqux", 2)],
        )

    def test_unicode_line_breaks_split_lines(self) -> None:
        result = ingest_texts([("nouns", "cat\x85dog\u2028owl\u2029elk")])
        self.assertEqual(result.issues, ())
        self.assertEqual(result.word_sets[0].words, ("cat", "dog", "owl", "elk"))

    def test_trailing_newline_does_not_add_empty_word(self) -> None:
        result = ingest_texts([("nouns", "cat\ndog\n")])
        self.assertEqual(result.issues, ())
        self.assertEqual(result.word_sets[0].words, ("cat", "dog"))

    def test_source_with_only_invalid_words_yields_no_word_set(self) -> None:
        result = ingest_texts([("nums", "1\n2")])
        self.assertEqual(result.word_sets, ())
        self.assertEqual(len(result.issues), 2)
        self.assertTrue(all(isinstance(i, InvalidWord) for i in result.issues))

    def test_bad_source_does_not_stop_siblings(self) -> None:
        result = ingest_texts([("bad name", "foo"), ("empty", ""), ("good", "foo")])
        self.assertEqual([ws.property_name for ws in result.word_sets], ["Good"])
        self.assertEqual(
            [type(i) for i in result.issues], [InvalidName, EmptySource]
        )

    def test_zero_word_sets_is_not_fatal(self) -> None:
        result = ingest_texts([("1", "a"), ("2", "b")])
        self.assertEqual(result.word_sets, ())
        self.assertEqual(len(result.issues), 2)

    def test_empty_input(self) -> None:
        result = ingest([])
        self.assertEqual(result.word_sets, ())
        self.assertEqual(result.issues, ())
        result.raise_for_issues()


class InvalidNamePolicyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.source = WordFile.from_text("te#9st", "foo\nb@r\n9")

    def test_skip_does_not_inspect_words(self) -> None:
        word_set, issues = ingest_file(self.source)
        self.assertIsNone(word_set)
        self.assertEqual(issues, [InvalidName(name="te#9st")])

    def test_scan_reports_words_but_emits_no_word_set(self) -> None:
        word_set, issues = ingest_file(self.source, invalid_name_policy=InvalidNamePolicy.SCAN)
        self.assertIsNone(word_set)
        self.assertEqual(
            issues,
            [
                InvalidName(name="te#9st"),
                InvalidWord(word="b@r", source_name="te#9st", line=2),
                InvalidWord(word="9", source_name="te#9st", line=3),
            ],
        )

    def test_policy_parses_from_string(self) -> None:
        self.assertIs(InvalidNamePolicy("scan"), InvalidNamePolicy.SCAN)


class IngestionResultTests(unittest.TestCase):
    def test_raise_for_issues_carries_errors_only(self) -> None:
        result = ingest_texts([("empty", ""), ("words", "ok\nn0")])
        with self.assertRaises(IngestionFailed) as ctx:
            result.raise_for_issues()
        self.assertEqual(len(ctx.exception.issues), 1)
        self.assertIn("FWDN-codegen-002", str(ctx.exception))

    def test_warnings_alone_do_not_raise(self) -> None:
        result = ingest_texts([("empty", "")])
        result.raise_for_issues()

    def test_base_issue_is_abstract(self) -> None:
        with self.assertRaises(TypeError):
            ValidationIssue()

    def test_issue_codes_and_text(self) -> None:
        result = ingest_texts([("b4d", ""), ("empty", ""), ("words", "ok\nn0")])
        self.assertEqual(
            [i.code for i in result.issues],
            ["FWDN-codegen-001", "FWDN-codegen-003", "FWDN-codegen-002"],
        )
        self.assertEqual(str(result.issues[2]), "FWDN-codegen-002: InvalidWord 'n0' (words:2)")
        self.assertEqual(str(result.issues[1]), "FWDN-codegen-003: EmptySource (empty)")


if __name__ == "__main__":
    unittest.main()
