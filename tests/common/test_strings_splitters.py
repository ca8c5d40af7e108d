from cinereview.common.strings.splitters import blank_to_none, csv_to_list


def test_csv_to_list_none():
    assert csv_to_list(None) == []


def test_csv_to_list_list_input():
    assert csv_to_list([" a ", "b", "", "  "]) == ["a", "b"]


def test_csv_to_list_string_input():
    assert csv_to_list(" a, b ,c ,, d ") == ["a", "b", "c", "d"]


def test_blank_to_none():
    assert blank_to_none(None) is None
    assert blank_to_none("   ") is None
    assert blank_to_none(" drama ") == "drama"
