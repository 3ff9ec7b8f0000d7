from holdem.deck import parse_cards
from holdem.game_engine import GameEngine
from holdem.hand_evaluation import HandCategory, HandValue
from holdem.showdown_engine import ShowdownEngine


def showdown_for(players, board):
    engine = GameEngine(players)
    engine.community = parse_cards(board)
    return ShowdownEngine(engine).evaluate_hands()


def test_showdown_single_winner(make_player):
    players = [
        make_player("alice", hand="Ah Ad"),
        make_player("bob", hand="Kh 2c"),
        make_player("carol", hand="9s 9d"),
    ]

    result = showdown_for(players, "10h Jh Qh 3c 4d")

    assert result["winners"] == ["alice"]
    assert result["hands"]["alice"] == HandValue(HandCategory.ONE_PAIR, (14, 12, 11, 10))
    assert result["hands"]["bob"].category == HandCategory.HIGH_CARD
    assert result["hands"]["carol"] == HandValue(HandCategory.ONE_PAIR, (9, 12, 11, 10))
    assert result["descriptions"]["alice"] == "Pair of Aces"
    assert set(result["hands"].keys()) == {"alice", "bob", "carol"}


def test_showdown_tie_names_every_winner(make_player):
    players = [
        make_player("alice", hand="Ah Kd"),
        make_player("bob", hand="Ac Kh"),
        make_player("carol", hand="8s 6d"),
    ]

    result = showdown_for(players, "2h 7c 9s Jc 4c")

    assert result["winners"] == ["alice", "bob"]
    assert result["hands"]["alice"] == result["hands"]["bob"]


def test_board_plays_for_everyone(make_player):
    players = [make_player("alice", hand="2c 3d"), make_player("bob", hand="4h 5c")]
    result = showdown_for(players, "As Ks Qs Js 10s")
    assert result["winners"] == ["alice", "bob"]
    assert result["descriptions"]["bob"] == "Royal Flush"


def test_kicker_decides_between_equal_pairs(make_player):
    players = [make_player("alice", hand="Qs 9c"), make_player("bob", hand="Qd 8c")]
    result = showdown_for(players, "Qh 6d 5c 3s 2h")
    assert result["winners"] == ["alice"]


def test_folded_player_is_shown_but_cannot_win(make_player):
    players = [
        make_player("alice", hand="As Ah"),
        make_player("bob", hand="7c 2d"),
        make_player("carol", hand="Kc Kd", state="folded"),
    ]

    result = showdown_for(players, "Ks 9h 5d 3c Jh")

    assert result["winners"] == ["alice"]
    assert result["hands"]["carol"].category == HandCategory.THREE_OF_A_KIND


def test_showdown_without_enough_cards(make_player):
    players = [make_player("alice", hand="As Ah"), make_player("bob", hand="Kc Kd")]
    result = showdown_for(players, "")
    assert result["winners"] == []
    assert result["hands"] == {}
    assert result["all_hands"]["alice"] == parse_cards("As Ah")


def test_showdown_does_not_move_chips(make_player):
    players = [make_player("alice", chips=10, hand="As Ah"), make_player("bob", chips=20, hand="7c 2d")]
    showdown_for(players, "Ks 9h 5d 3c Jh")
    assert [p.chips for p in players] == [10, 20]
