import pytest

from algokit.patterns import (
    can_make_pali_queries,
    can_make_pali_queries_slow,
    di_string_match,
    di_string_match_v2,
    find_longest_word,
    find_substring,
    is_subsequence,
    is_valid_parentheses,
    longest_valid_parentheses,
    maximum_length,
)

LONG_TEXT = (
    "pjzkrkevzztxductzzxmxsvwjkxpvukmfjywwetvfnujhweiybwvvsrfequzkhossmootkmyxgjgfordrpapjuunmqnxxdrqrfgkrsjqbszgiqlcfnrpjlcwdrvbumtotzylshdvccdmsqoadfrpsvnwpizlwszrtyclhgilklydbmfhuywotjmktnwrfvizvnmfvvqfiokkdprznnnjycttprkxpuykhmpchiksyucbmtabiqkisgbhxngmhezrrqvayfsxauampdpxtafniiwfvdufhtwajrbkxtjzqjnfocdhekumttuqwovfjrgulhekcpjszyynadxhnttgmnxkduqmmyhzfnjhducesctufqbumxbamalqudeibljgbspeotkgvddcwgxidaiqcvgwykhbysjzlzfbupkqunuqtraxrlptivshhbihtsigtpipguhbhctcvubnhqipncyxfjebdnjyetnlnvmuxhzsdahkrscewabejifmxombiamxvauuitoltyymsarqcuuoezcbqpdaprxmsrickwpgwpsoplhugbikbkotzrtqkscekkgwjycfnvwfgdzogjzjvpcvixnsqsxacfwndzvrwrycwxrcismdhqapoojegggkocyrdtkzmiekhxoppctytvphjynrhtcvxcobxbcjjivtfjiwmduhzjokkbctweqtigwfhzorjlkpuuliaipbtfldinyetoybvugevwvhhhweejogrghllsouipabfafcxnhukcbtmxzshoyyufjhzadhrelweszbfgwpkzlwxkogyogutscvuhcllphshivnoteztpxsaoaacgxyaztuixhunrowzljqfqrahosheukhahhbiaxqzfmmwcjxountkevsvpbzjnilwpoermxrtlfroqoclexxisrdhvfsindffslyekrzwzqkpeocilatftymodgztjgybtyheqgcpwogdcjlnlesefgvimwbxcbzvaibspdjnrpqtyeilkcspknyylbwndvkffmzuriilxagyerjptbgeqgebiaqnvdubrtxibhvakcyotkfonmseszhczapxdlauexehhaireihxsplgdgmxfvaevrbadbwjbdrkfbbjjkgcztkcbwagtcnrtqryuqixtzhaakjlurnumzyovawrcjiwabuwretmdamfkxrgqgcdgbrdbnugzecbgyxxdqmisaqcyjkqrntxqmdrczxbebemcblftxplafnyoxqimkhcykwamvdsxjezkpgdpvopddptdfbprjustquhlazkjfluxrzopqdstulybnqvyknrchbphcarknnhhovweaqawdyxsqsqahkepluypwrzjegqtdoxfgzdkydeoxvrfhxusrujnmjzqrrlxglcmkiykldbiasnhrjbjekystzilrwkzhontwmehrfsrzfaqrbbxncphbzuuxeteshyrveamjsfiaharkcqxefghgceeixkdgkuboupxnwhnfigpkwnqdvzlydpidcljmflbccarbiegsmweklwngvygbqpescpeichmfidgsjmkvkofvkuehsmkkbocgejoiqcnafvuokelwuqsgkyoekaroptuvekfvmtxtqshcwsztkrzwrpabqrrhnlerxjojemcxel"
)
LONG_WORDS = [
    "dhvf", "sind", "ffsl", "yekr", "zwzq", "kpeo", "cila", "tfty", "modg",
    "ztjg", "ybty", "heqg", "cpwo", "gdcj", "lnle", "sefg", "vimw", "bxcb",
]


def test_find_substring_long_case():
    expected = LONG_TEXT.index("".join(LONG_WORDS))
    assert find_substring(LONG_TEXT, LONG_WORDS) == [expected]


@pytest.mark.parametrize(
    "text, words, expected",
    [
        ("barfoothefoobarman", ["foo", "bar"], [0, 9]),
        ("foobarfoobar", ["foo", "bar"], [0, 3, 6]),
        ("aaa", ["a", "a"], [0, 1]),
        ("abcdef", ["xyz"], []),
    ],
)
def test_find_substring(text, words, expected):
    assert find_substring(text, words) == expected


def test_find_substring_rejects_empty_words():
    with pytest.raises(ValueError):
        find_substring("abc", [])


@pytest.mark.parametrize(
    "text, expected",
    [("(()", 2), (")()())", 4), ("", 0), ("()(())", 6), ("((", 0)],
)
def test_longest_valid_parentheses(text, expected):
    assert longest_valid_parentheses(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("(())", True), ("())", False), ("(", False), ("", True), ("()()", True)],
)
def test_is_valid_parentheses(text, expected):
    assert is_valid_parentheses(text) is expected


def test_is_subsequence():
    assert is_subsequence("ace", "abcde") is True
    assert is_subsequence("aec", "abcde") is False
    assert is_subsequence("abcdef", "abc") is False


def test_is_subsequence_rejects_empty_candidate():
    with pytest.raises(ValueError):
        is_subsequence("", "abc")


@pytest.mark.parametrize(
    "dictionary, expected",
    [
        (["ale", "apple", "monkey", "plea"], "apple"),
        (["a", "b", "c"], "a"),
        (["zzz"], ""),
    ],
)
def test_find_longest_word(dictionary, expected):
    assert find_longest_word("abpcplea", dictionary) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("ceeeeeeeeeeeebmmmfffeeeeeeeeeeeewww", 11),
        ("aaaa", 2),
        ("abcdef", -1),
        ("abcaba", 1),
        ("fafff", 1),
        ("", -1),
    ],
)
def test_maximum_length(text, expected):
    assert maximum_length(text) == expected


@pytest.mark.parametrize("func", [can_make_pali_queries, can_make_pali_queries_slow])
def test_can_make_pali_queries(func):
    queries = [[3, 3, 0], [1, 2, 0], [0, 3, 1], [0, 3, 2], [0, 4, 1]]
    assert func("abcda", queries) == [True, False, False, True, True]


@pytest.mark.parametrize(
    "pattern, expected",
    [("IDID", [0, 2, 1, 4, 3]), ("III", [0, 1, 2, 3]), ("DDI", [2, 1, 0, 3])],
)
def test_di_string_match(pattern, expected):
    assert di_string_match(pattern) == expected


def test_di_string_match_empty_and_impossible():
    assert di_string_match("") is None
    assert di_string_match("X") is None


def test_di_string_match_v2_value():
    assert di_string_match_v2("IDID") == [0, 4, 1, 3, 2]


@pytest.mark.parametrize("pattern", ["IDID", "III", "DDI", "DIDDI", ""])
def test_di_string_match_v2_is_valid(pattern):
    perm = di_string_match_v2(pattern)
    assert sorted(perm) == list(range(len(pattern) + 1))
    for step, earlier, later in zip(pattern, perm, perm[1:]):
        assert (later > earlier) == (step == "I")