from linkedset.demo import main


def test_demo_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "Set 1: [apple, banana, orange]",
        "Set 2: [cherry]",
        "Set 3: [gooseberry, melon]",
        "Set 1 after adding Set 3: [apple, banana, orange, gooseberry, melon]",
        "Set 1 after removing 'apple': [banana, orange, gooseberry, melon]",
        "Set 1 after clearing: []",
    ]
