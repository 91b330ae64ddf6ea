from pattern_catalog.behavioral.template_method import OrcsAI, main


def test_main_output(capsys):
    main()

    assert capsys.readouterr().out.splitlines() == [
        "Orcs AI Turn:",
        "Collecting resources from built structures...",
        "Orcs are building farms, barracks, and stronghold...",
        "Orcs are building units...",
        "Orc scouts are heading to position: map center",
        "",
        "Monsters AI Turn:",
        "Monsters don't collect resources.",
        "Monsters don't build structures.",
        "Monsters don't build units.",
        "Monster scouts are heading to position: map center",
    ]


def test_warriors_attack_a_known_enemy(capsys):
    class AggressiveOrcsAI(OrcsAI):
        def closest_enemy(self):
            return "enemy base"

    AggressiveOrcsAI().turn()

    assert capsys.readouterr().out.splitlines()[-1] == "Orc warriors are heading to position: enemy base"
