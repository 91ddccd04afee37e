import pytest

from algokit.patterns.adapter import OwnCharger, PowerAdapter, RussiaSocket, demo


def test_adapter_delegates_to_charger(capsys):
    PowerAdapter().charge()
    adapted = capsys.readouterr().out
    OwnCharger().charge_with_feet_flat()
    direct = capsys.readouterr().out
    assert adapted == direct
    assert adapted.strip() == "OwnCharger.charge_with_feet_flat"


def test_socket_interface_is_abstract():
    with pytest.raises(TypeError):
        RussiaSocket()


def test_demo_charges_once(capsys):
    demo()
    assert capsys.readouterr().out.splitlines() == ["OwnCharger.charge_with_feet_flat"]