"""
Операции над списками валютных пар

Чистые функции: входные списки не изменяются, порядок элементов
сохраняется. Отсутствие совпадения сообщается через False / None,
а не через исключение.
"""

import logging
from collections.abc import Iterable, Sequence

from src.currency.common.strings import is_present_case_insensitive
from src.currency.domain.pair import CurrencyPair


logger = logging.getLogger(__name__)


# =============================================================================
# ПОИСК
# =============================================================================


def contains(pairs: Iterable[CurrencyPair], target: CurrencyPair, exact: bool = False) -> bool:
    """
    Проверка наличия пары в списке.

    Args:
        pairs: Список пар
        target: Искомая пара
        exact: Учитывать ли порядок активов (см. CurrencyPair.equal)
    """
    return any(p.equal(target, exact) for p in pairs)


def contains_currency(pair: CurrencyPair, code: str) -> bool:
    """Проверка, входит ли актив code в пару (без учёта регистра)"""
    return pair.contains_currency(code)


def copy_pair_format(
    target: CurrencyPair, pairs: Iterable[CurrencyPair], exact: bool = False
) -> CurrencyPair | None:
    """
    Поиск пары из списка, совпадающей с target, вместе с её форматом.

    Используется, чтобы привести пару к формату биржи: возвращается элемент
    списка (с его разделителем и регистром), а не сам target.

    Args:
        target: Пара для поиска
        pairs: Список пар в нужном формате
        exact: Учитывать ли порядок активов

    Returns:
        Первая совпавшая пара или None, если совпадений нет
    """
    for p in pairs:
        if target.equal(p, exact):
            return p
    return None


# =============================================================================
# ПРЕОБРАЗОВАНИЯ СПИСКОВ
# =============================================================================


def remove_pairs_by_filter(pairs: Iterable[CurrencyPair], code: str) -> list[CurrencyPair]:
    """
    Удаление всех пар, содержащих актив code.

    Args:
        pairs: Исходный список (не изменяется)
        code: Код актива для фильтрации (без учёта регистра)

    Returns:
        Новый список без пар с code, порядок сохранён
    """
    source = list(pairs)
    result = [p for p in source if not p.contains_currency(code)]
    if len(result) != len(source):
        logger.debug("Removed %d pairs containing %s", len(source) - len(result), code)
    return result


def format_pairs(
    raw_pairs: Iterable[str], delimiter: str = "", index: str = ""
) -> list[CurrencyPair]:
    """
    Разбор списка строк в список пар.

    Способ разбора:
    - delimiter непуст → CurrencyPair.from_delimited
    - иначе index непуст → CurrencyPair.from_index
    - иначе → CurrencyPair.from_fixed_split (первые 3 символа)

    Пустые строки пропускаются. Некорректная непустая строка прерывает
    разбор всего списка.

    Raises:
        MalformedPairError: Если непустую строку невозможно разобрать
    """
    result: list[CurrencyPair] = []
    for position, raw in enumerate(raw_pairs):
        if not raw:
            logger.debug("Skipping empty pair at position %d", position)
            continue
        if delimiter:
            result.append(CurrencyPair.from_delimited(raw, delimiter))
        elif index:
            result.append(CurrencyPair.from_index(raw, index))
        else:
            result.append(CurrencyPair.from_fixed_split(raw))
    return result


def pairs_to_strings(pairs: Iterable[CurrencyPair]) -> list[str]:
    """Список строк pair() в исходном порядке"""
    return [str(p.pair()) for p in pairs]


def find_pair_differences(
    old_pairs: Sequence[str], new_pairs: Sequence[str]
) -> tuple[list[str], list[str]]:
    """
    Сравнение двух списков пар без учёта регистра.

    Args:
        old_pairs: Предыдущий список строк пар
        new_pairs: Новый список строк пар

    Returns:
        (added, removed): added - элементы new_pairs, которых нет в old_pairs;
        removed - элементы old_pairs, которых нет в new_pairs.
        Пустые строки пропускаются, порядок соответствует входным спискам.
    """
    added = [p for p in new_pairs if p and not is_present_case_insensitive(old_pairs, p)]
    removed = [p for p in old_pairs if p and not is_present_case_insensitive(new_pairs, p)]
    logger.debug("Pair differences: %d added, %d removed", len(added), len(removed))
    return added, removed
