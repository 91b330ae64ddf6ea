from pattern_catalog.behavioral.chain_of_responsibility import Button, Dialog, Panel, main


def test_main_output(capsys):
    main()

    assert capsys.readouterr().out.splitlines() == [
        "Dialog Help: Opening wiki page at http://help.wiki/page",
    ]


def test_first_component_with_help_answers(capsys):
    dialog = Dialog("http://help.wiki/page")
    panel = Panel("This panel does things")
    button = Button(None)
    button.set_container(panel)
    panel.set_container(dialog)

    button.show_help()

    assert capsys.readouterr().out.splitlines() == ["Panel Help: This panel does things"]


def test_button_with_tooltip_does_not_forward(capsys):
    button = Button("Click to save")
    button.set_container(Dialog("http://help.wiki/page"))

    button.show_help()

    assert capsys.readouterr().out.splitlines() == ["Button Help: Click to save"]


def test_unhandled_request_prints_nothing(capsys):
    button = Button(None)
    panel = Panel(None)
    button.set_container(panel)

    button.show_help()

    assert capsys.readouterr().out == ""
