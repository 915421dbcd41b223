from __future__ import annotations

import pytest

from gm_manifest.events import MAX_EVENT_INDEX, EventCategory, EventDescriptor, GameMakerEvents
from gm_manifest.exceptions import ProbeBoundError
from gm_manifest.synthesis.commands import CommandSynthesizer
from gm_manifest.synthesis.model import SynthesisConfig


def test_create_scenario(fake_events) -> None:
    synth = CommandSynthesizer(enumerator=fake_events.named(EventCategory.CREATE, ["Create"]))
    commands = synth.synthesize("Create")
    assert len(commands) == 1
    assert commands[0].to_payload() == {
        "command": "gmVfs.addCreate",
        "title": "Create",
        "category": "Create",
        "enablement": "view == gmVfs && viewItem =~ /canCreateEvent/",
    }
    assert commands[0].event.name == "Create"


def test_probes_every_index_below_the_bound(fake_events) -> None:
    events = fake_events.named(EventCategory.STEP, ["Step0"])
    CommandSynthesizer(enumerator=events, config=SynthesisConfig(probe_bound=7)).synthesize(
        EventCategory.STEP
    )
    assert events.calls == [("Step", index) for index in range(7)]


def test_gaps_are_skipped_and_result_sorted_by_event(fake_events) -> None:
    table = {
        ("Draw", 73): EventDescriptor(EventCategory.DRAW, 73, "Draw End"),
        ("Draw", 0): EventDescriptor(EventCategory.DRAW, 0, "Draw"),
        ("Draw", 64): EventDescriptor(EventCategory.DRAW, 64, "Draw GUI"),
    }
    commands = CommandSynthesizer(enumerator=fake_events(table)).synthesize("Draw")
    assert [command.command for command in commands] == [
        "gmVfs.addDraw",
        "gmVfs.addDrawGui",
        "gmVfs.addDrawEnd",
    ]


def test_probe_bound_below_taxonomy_maximum_aborts() -> None:
    synth = CommandSynthesizer(config=SynthesisConfig(probe_bound=64))
    with pytest.raises(ProbeBoundError) as info:
        synth.synthesize("Draw")
    assert info.value.env == {"probe_bound": 64, "max_index": MAX_EVENT_INDEX}
    with pytest.raises(ProbeBoundError):
        CommandSynthesizer(
            config=SynthesisConfig(probe_bound=MAX_EVENT_INDEX)
        ).synthesize_all()


def test_probe_bound_just_past_maximum_is_complete() -> None:
    synth = CommandSynthesizer(config=SynthesisConfig(probe_bound=MAX_EVENT_INDEX + 1))
    assert [command.title for command in synth.synthesize("Draw")][-1] == "Post-Draw"
    assert len(synth.synthesize("Other")) == 56


def test_enumerator_order_never_leaks_into_result(fake_events) -> None:
    table = {
        ("Step", 0): EventDescriptor(EventCategory.STEP, 1, "Begin Step"),
        ("Step", 1): EventDescriptor(EventCategory.STEP, 0, "Step"),
    }
    commands = CommandSynthesizer(enumerator=fake_events(table)).synthesize("Step")
    assert [command.event.index for command in commands] == [0, 1]


@pytest.mark.parametrize(
    ("category", "count"),
    [
        ("Create", 1),
        ("Destroy", 1),
        ("CleanUp", 1),
        ("Step", 3),
        ("Alarm", 12),
        ("Draw", 9),
        ("Other", 56),
    ],
)
def test_default_taxonomy_counts(category: str, count: int) -> None:
    commands = CommandSynthesizer().synthesize(category)
    assert len(commands) == count
    assert len({command.command for command in commands}) == count


def test_synthesize_all_has_unique_identifiers() -> None:
    grouped = CommandSynthesizer(enumerator=GameMakerEvents()).synthesize_all()
    assert list(grouped) == list(EventCategory)
    identifiers = [command.command for commands in grouped.values() for command in commands]
    assert len(identifiers) == len(set(identifiers))
    assert "gmVfs.addCleanUp" in identifiers
    assert "gmVfs.addAsyncHttp" in identifiers
    assert "gmVfs.addAlarm11" in identifiers
