"""
Тесты для операций над списками валютных пар

Проверяет:
1. contains / contains_currency
2. remove_pairs_by_filter (длина и порядок)
3. copy_pair_format (первое совпадение, None при отсутствии)
4. format_pairs (разделитель, индекс, фиксированный разбор, пустые строки)
5. pairs_to_strings
6. find_pair_differences
"""

import logging

import pytest

from src.currency.domain import (
    CurrencyPair,
    MalformedPairError,
    contains,
    contains_currency,
    copy_pair_format,
    find_pair_differences,
    format_pairs,
    pairs_to_strings,
    remove_pairs_by_filter,
)


@pytest.fixture
def exchange_pairs() -> list[CurrencyPair]:
    """Пары в формате биржи: нижний регистр, разделитель '_'"""
    return [
        CurrencyPair.from_string("btc_usd"),
        CurrencyPair.from_string("eth_usd"),
        CurrencyPair.from_string("eth_btc"),
        CurrencyPair.from_string("ltc_eur"),
    ]


class TestContains:
    """Тесты для contains и contains_currency"""

    def test_contains_other_format(self, exchange_pairs: list[CurrencyPair]) -> None:
        assert contains(exchange_pairs, CurrencyPair.from_string("BTCUSD"))

    def test_contains_swapped_non_exact(self, exchange_pairs: list[CurrencyPair]) -> None:
        target = CurrencyPair.from_parts("USD", "BTC")
        assert contains(exchange_pairs, target, exact=False)
        assert not contains(exchange_pairs, target, exact=True)

    def test_not_contains(self, exchange_pairs: list[CurrencyPair]) -> None:
        assert not contains(exchange_pairs, CurrencyPair.from_parts("XRP", "USD"))

    def test_empty_list(self) -> None:
        assert not contains([], CurrencyPair.from_parts("BTC", "USD"))

    def test_contains_currency(self) -> None:
        pair = CurrencyPair.from_string("BTC_USD")
        assert contains_currency(pair, "btc")
        assert contains_currency(pair, "usd")
        assert not contains_currency(pair, "eur")


class TestRemovePairsByFilter:
    """Тесты для remove_pairs_by_filter"""

    def test_removes_matching(self, exchange_pairs: list[CurrencyPair]) -> None:
        result = remove_pairs_by_filter(exchange_pairs, "USD")
        assert pairs_to_strings(result) == ["eth_btc", "ltc_eur"]

    def test_order_preserved(self, exchange_pairs: list[CurrencyPair]) -> None:
        result = remove_pairs_by_filter(exchange_pairs, "ltc")
        assert result == exchange_pairs[:3]

    def test_never_grows(self, exchange_pairs: list[CurrencyPair]) -> None:
        for code in ("BTC", "ETH", "XRP", ""):
            assert len(remove_pairs_by_filter(exchange_pairs, code)) <= len(exchange_pairs)

    def test_input_not_modified(self, exchange_pairs: list[CurrencyPair]) -> None:
        before = list(exchange_pairs)
        remove_pairs_by_filter(exchange_pairs, "ETH")
        assert exchange_pairs == before

    def test_no_match_returns_all(self, exchange_pairs: list[CurrencyPair]) -> None:
        assert remove_pairs_by_filter(exchange_pairs, "XRP") == exchange_pairs

    def test_logs_removed_count(
        self, exchange_pairs: list[CurrencyPair], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.currency.domain.pairs"):
            remove_pairs_by_filter(exchange_pairs, "ETH")
        assert "Removed 2 pairs containing ETH" in caplog.text


class TestCopyPairFormat:
    """Тесты для copy_pair_format"""

    def test_returns_list_element(self, exchange_pairs: list[CurrencyPair]) -> None:
        """Возвращается элемент списка с форматом биржи"""
        result = copy_pair_format(CurrencyPair.from_string("ETHUSD"), exchange_pairs)
        assert result is exchange_pairs[1]
        assert result.pair() == "eth_usd"

    def test_first_match_wins(self) -> None:
        pairs = [
            CurrencyPair.from_string("BTC-USD"),
            CurrencyPair.from_string("btc_usd"),
        ]
        result = copy_pair_format(CurrencyPair.from_parts("BTC", "USD"), pairs)
        assert result is pairs[0]

    def test_swapped_non_exact(self, exchange_pairs: list[CurrencyPair]) -> None:
        target = CurrencyPair.from_parts("BTC", "ETH")
        assert copy_pair_format(target, exchange_pairs, exact=False) is exchange_pairs[2]
        assert copy_pair_format(target, exchange_pairs, exact=True) is None

    def test_no_match_returns_none(self, exchange_pairs: list[CurrencyPair]) -> None:
        assert copy_pair_format(CurrencyPair.from_parts("XRP", "JPY"), exchange_pairs) is None


class TestFormatPairs:
    """Тесты для format_pairs"""

    def test_with_delimiter(self) -> None:
        result = format_pairs(["BTC-USD", "ETH-BTC"], delimiter="-")
        assert [(p.first_currency, p.second_currency) for p in result] == [
            ("BTC", "USD"),
            ("ETH", "BTC"),
        ]
        assert all(p.delimiter == "-" for p in result)

    def test_with_index(self) -> None:
        result = format_pairs(["XBTUSD", "ETHXBT"], index="XBT")
        assert result[0].first_currency == "XBT"
        assert result[0].second_currency == "USD"
        assert result[1].first_currency == "ETH"
        assert result[1].second_currency == "XBT"

    def test_delimiter_takes_precedence_over_index(self) -> None:
        result = format_pairs(["XBT_USD"], delimiter="_", index="XBT")
        assert result[0].delimiter == "_"
        assert result[0].second_currency == "USD"

    def test_fixed_split(self) -> None:
        result = format_pairs(["BTCUSD", "ltcusdt"])
        assert pairs_to_strings(result) == ["BTCUSD", "ltcusdt"]
        assert result[1].first_currency == "ltc"
        assert result[1].second_currency == "usdt"

    def test_empty_entries_skipped(self) -> None:
        result = format_pairs(["", "BTC_USD", "", "ETH_USD"], delimiter="_")
        assert pairs_to_strings(result) == ["BTC_USD", "ETH_USD"]

    def test_empty_input(self) -> None:
        assert format_pairs([]) == []
        assert format_pairs(["", ""]) == []

    def test_malformed_entry_aborts_batch(self) -> None:
        with pytest.raises(MalformedPairError):
            format_pairs(["BTC_USD", "ETHUSD"], delimiter="_")

    def test_malformed_fixed_split(self) -> None:
        with pytest.raises(MalformedPairError):
            format_pairs(["BTCUSD", "BT"])


class TestPairsToStrings:
    """Тесты для pairs_to_strings"""

    def test_order_and_format(self) -> None:
        pairs = [
            CurrencyPair.from_string("btc_usd"),
            CurrencyPair.from_parts("ETH", "EUR"),
        ]
        result = pairs_to_strings(pairs)
        assert result == ["btc_usd", "ETHEUR"]
        assert all(type(s) is str for s in result)

    def test_empty(self) -> None:
        assert pairs_to_strings([]) == []


class TestFindPairDifferences:
    """Тесты для find_pair_differences"""

    def test_added_and_removed(self) -> None:
        added, removed = find_pair_differences(["BTC_USD", "ETH_USD"], ["BTC_USD", "LTC_USD"])
        assert added == ["LTC_USD"]
        assert removed == ["ETH_USD"]

    def test_case_insensitive(self) -> None:
        added, removed = find_pair_differences(["btc_usd"], ["BTC_USD"])
        assert added == []
        assert removed == []

    def test_empty_entries_skipped(self) -> None:
        added, removed = find_pair_differences(["", "BTC_USD"], ["BTC_USD", "", "XRP_USD"])
        assert added == ["XRP_USD"]
        assert removed == []

    def test_order_follows_input(self) -> None:
        added, removed = find_pair_differences(
            ["A_B", "C_D", "E_F"], ["Z_Y", "A_B", "X_W"]
        )
        assert added == ["Z_Y", "X_W"]
        assert removed == ["C_D", "E_F"]

    def test_empty_lists(self) -> None:
        assert find_pair_differences([], []) == ([], [])
        assert find_pair_differences([], ["BTC_USD"]) == (["BTC_USD"], [])
        assert find_pair_differences(["BTC_USD"], []) == ([], ["BTC_USD"])
