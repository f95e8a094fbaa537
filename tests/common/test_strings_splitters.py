from mp3slice.common.strings.splitters import csv_to_list


def test_csv_to_list_variants():
    assert csv_to_list(None) == []
    assert csv_to_list("head, skip_metadata,,") == ["head", "skip_metadata"]
    assert csv_to_list([" head ", "", None]) == ["head"]
