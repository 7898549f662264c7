"""
Тесты для классификации поискового запроса
"""

import unittest
from unittest.mock import AsyncMock, MagicMock

from app.schemas.search import BlockNumberQuery, InvalidQuery, TransactionHashQuery
from app.services.chain_reader import ChainReader, NotFoundError
from app.services.query_classifier import (
    BLOCK_NUMBER_OUT_OF_RANGE,
    EMPTY_QUERY_MESSAGE,
    INVALID_QUERY_MESSAGE,
    InvalidQueryError,
    classify,
    resolve,
)
from tests.fake_chain import FakeProvider

TX_HASH = "0x" + "a" * 64


class TestClassify(unittest.TestCase):
    """Тесты правил классификации"""

    def test_digits_are_block_number(self):
        self.assertEqual(classify("123"), BlockNumberQuery(number=123))

    def test_whitespace_is_trimmed(self):
        self.assertEqual(classify(" 123 "), BlockNumberQuery(number=123))
        self.assertEqual(classify("\t42\n"), BlockNumberQuery(number=42))

    def test_zero_and_leading_zeros(self):
        self.assertEqual(classify("0"), BlockNumberQuery(number=0))
        self.assertEqual(classify("007"), BlockNumberQuery(number=7))

    def test_number_longer_than_int_limit(self):
        """Строка длиннее лимита int() не приводит к ValueError"""
        self.assertEqual(
            classify("1" * 5000), BlockNumberQuery(number=BLOCK_NUMBER_OUT_OF_RANGE)
        )

    def test_long_leading_zeros(self):
        self.assertEqual(classify("0" * 5000 + "7"), BlockNumberQuery(number=7))
        self.assertEqual(classify("0" * 5000), BlockNumberQuery(number=0))

    def test_number_above_uint64(self):
        self.assertEqual(
            classify(str(2**64 - 1)), BlockNumberQuery(number=2**64 - 1)
        )
        self.assertEqual(
            classify(str(2**64 + 5)), BlockNumberQuery(number=BLOCK_NUMBER_OUT_OF_RANGE)
        )

    def test_empty_is_invalid(self):
        query = classify("")

        self.assertIsInstance(query, InvalidQuery)
        self.assertEqual(query.reason, "empty")

    def test_whitespace_only_is_invalid(self):
        self.assertEqual(classify("   ").reason, "empty")

    def test_transaction_hash(self):
        self.assertEqual(classify(TX_HASH), TransactionHashQuery(tx_hash=TX_HASH))

    def test_transaction_hash_trimmed_and_kept_as_is(self):
        mixed = "0x" + "AbC" * 21 + "d"

        self.assertEqual(
            classify(f"  {mixed} "), TransactionHashQuery(tx_hash=mixed)
        )

    def test_short_hash_is_invalid(self):
        self.assertEqual(classify("0x" + "a" * 10).reason, "unrecognized")

    def test_long_hash_is_invalid(self):
        self.assertIsInstance(classify("0x" + "a" * 65), InvalidQuery)

    def test_uppercase_prefix_is_invalid(self):
        self.assertIsInstance(classify("0X" + "a" * 64), InvalidQuery)

    def test_malformed_hash_of_right_length_passes(self):
        """Проверяется только форма, не содержимое"""
        malformed = "0x" + "z" * 64

        self.assertEqual(classify(malformed), TransactionHashQuery(tx_hash=malformed))

    def test_mixed_text_is_invalid(self):
        self.assertIsInstance(classify("abc123"), InvalidQuery)
        self.assertIsInstance(classify("#123"), InvalidQuery)
        self.assertIsInstance(classify("-5"), InvalidQuery)
        self.assertIsInstance(classify("12 34"), InvalidQuery)

    def test_non_ascii_digits_are_invalid(self):
        self.assertIsInstance(classify("١٢٣"), InvalidQuery)


class TestResolve(unittest.IsolatedAsyncioTestCase):
    """Тесты маршрутизации запроса в ChainReader"""

    async def test_block_query_goes_to_block_lookup(self):
        reader = MagicMock()
        reader.block_by_number = AsyncMock(return_value="block")

        result = await resolve(BlockNumberQuery(number=7), reader)

        self.assertEqual(result, "block")
        reader.block_by_number.assert_awaited_once_with(7)

    async def test_hash_query_goes_to_transaction_lookup(self):
        reader = MagicMock()
        reader.transaction_by_hash = AsyncMock(return_value="tx")

        result = await resolve(TransactionHashQuery(tx_hash=TX_HASH), reader)

        self.assertEqual(result, "tx")
        reader.transaction_by_hash.assert_awaited_once_with(TX_HASH)

    async def test_invalid_query_makes_no_provider_call(self):
        provider = FakeProvider([1, 1])
        reader = ChainReader(provider)

        with self.assertRaises(InvalidQueryError) as ctx:
            await resolve(classify("abc123"), reader)

        self.assertEqual(str(ctx.exception), INVALID_QUERY_MESSAGE)
        self.assertEqual(provider.block_calls, [])
        self.assertEqual(provider.transaction_calls, [])

    async def test_empty_query_message(self):
        with self.assertRaises(InvalidQueryError) as ctx:
            await resolve(classify(""), MagicMock())

        self.assertEqual(str(ctx.exception), EMPTY_QUERY_MESSAGE)

    async def test_huge_number_surfaces_as_not_found(self):
        provider = FakeProvider([1])
        reader = ChainReader(provider)

        with self.assertRaises(NotFoundError):
            await resolve(classify("9" * 5000), reader)

        self.assertEqual(
            [call["number"] for call in provider.block_calls],
            [BLOCK_NUMBER_OUT_OF_RANGE],
        )

    async def test_malformed_hash_surfaces_as_not_found(self):
        reader = ChainReader(FakeProvider([1]))

        with self.assertRaises(NotFoundError):
            await resolve(classify("0x" + "z" * 64), reader)


if __name__ == "__main__":
    unittest.main()
