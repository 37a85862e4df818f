import json

import pytest
from fakes import FakeLLM

from config import DiarizationConfig, TurnTakingHeuristics
from domain import Diarizer, SpeakerSegment, default_recovery
from domain.diarization_recovery import (
    ArrayReplyStrategy,
    DiarizationRecovery,
    KeyValueReplyStrategy,
    RecoveryStrategy,
    TurnTakingStrategy,
    WrappedArrayReplyStrategy,
    normalize_entries,
    split_sentences,
)
from exceptions import LLMServiceError

CONVERSATION = (
    "How are you today? I am fine thanks. The weather is nice. Okay, let us start."
)


def diarizer_for(content=None, error=None, config=None):
    llm = FakeLLM(content=content, error=error)
    return Diarizer(llm, "system", default_recovery(config or DiarizationConfig()))


def joined(segments):
    return " ".join(s.text for s in segments)


def test_split_sentences():
    assert split_sentences("One. Two? Three!  Four") == ["One.", "Two?", "Three!", "Four"]
    assert split_sentences("   ") == []


def test_normalize_entries_drops_unusable_entries():
    entries = [
        {"speaker": "A", "text": " Hi "},
        {"speaker": "B"},
        {"text": "No speaker"},
        "loose string",
        {"speaker": "C", "text": ""},
    ]

    assert normalize_entries(entries, "Unknown") == [
        SpeakerSegment(speaker="A", text="Hi"),
        SpeakerSegment(speaker="Unknown", text="No speaker"),
    ]


def test_array_reply_is_accepted():
    reply = [
        {"speaker": "Interviewer", "text": "Why this role?"},
        {"speaker": "Candidate", "text": "I like the team."},
    ]

    segments = diarizer_for(json.dumps(reply)).identify_speakers("Why this role? I like the team.")

    assert [s.speaker for s in segments] == ["Interviewer", "Candidate"]


def test_single_segment_reply_is_split_into_two_speakers():
    reply = [{"speaker": "Speaker 1", "text": "One. Two. Three. Four."}]

    segments = diarizer_for(json.dumps(reply)).identify_speakers("One. Two. Three. Four.")

    assert segments == [
        SpeakerSegment(speaker="Speaker 1", text="One. Two."),
        SpeakerSegment(speaker="Speaker 2", text="Three. Four."),
    ]


def test_single_segment_split_gives_first_half_the_extra_sentence():
    strategy = ArrayReplyStrategy(("Speaker 1", "Speaker 2"), "Unknown")

    segments = strategy.recover([{"speaker": "X", "text": "One. Two. Three."}], "")

    assert len(segments) == 2
    assert segments[0].text == "One. Two."
    assert segments[1].text == "Three."


def test_single_sentence_reply_is_kept_as_is():
    reply = [{"speaker": "Speaker 1", "text": "Only one sentence here."}]

    segments = diarizer_for(json.dumps(reply)).identify_speakers("Only one sentence here.")

    assert segments == [SpeakerSegment(speaker="Speaker 1", text="Only one sentence here.")]


@pytest.mark.parametrize("key", ["segments", "speakers"])
def test_wrapped_array_reply_is_accepted(key):
    reply = {key: [{"speaker": "A", "text": "Hello."}, {"speaker": "B", "text": "Hi."}]}

    segments = diarizer_for(json.dumps(reply)).identify_speakers("Hello. Hi.")

    assert [s.speaker for s in segments] == ["A", "B"]


def test_wrapped_array_strategy_skips_empty_arrays():
    strategy = WrappedArrayReplyStrategy("Unknown")

    assert strategy.recover({"segments": [], "speakers": []}, "") is None
    assert strategy.recover([{"speaker": "A", "text": "x"}], "") is None


def test_single_object_reply_becomes_one_segment():
    reply = {"speaker": "Alice", "text": "Good morning everyone."}

    segments = KeyValueReplyStrategy().recover(reply, "")

    assert segments == [SpeakerSegment(speaker="Alice", text="Good morning everyone.")]


def test_speaker_keyed_object_reply_is_reinterpreted():
    reply = {"Speaker1": "Where were you?", "speaker_2": "At home.", "confidence": "high"}

    segments = diarizer_for(json.dumps(reply)).identify_speakers("Where were you? At home.")

    assert segments == [
        SpeakerSegment(speaker="Speaker1", text="Where were you?"),
        SpeakerSegment(speaker="speaker_2", text="At home."),
    ]


def test_unrecognised_object_falls_back_to_turn_taking():
    segments = diarizer_for(json.dumps({"result": "ok"})).identify_speakers(CONVERSATION)

    assert len(segments) == 3


def test_garbage_reply_falls_back_to_turn_taking():
    segments = diarizer_for("this is not json").identify_speakers(CONVERSATION)

    assert segments == [
        SpeakerSegment(speaker="Speaker 1", text="How are you today?"),
        SpeakerSegment(speaker="Speaker 2", text="I am fine thanks. The weather is nice."),
        SpeakerSegment(speaker="Speaker 1", text="Okay, let us start."),
    ]
    assert joined(segments) == CONVERSATION


@pytest.mark.parametrize("content", ["42", "null"])
def test_scalar_reply_falls_back_to_turn_taking(content):
    segments = diarizer_for(content).identify_speakers(CONVERSATION)

    assert joined(segments) == CONVERSATION
    assert segments[0].speaker == "Speaker 1"


@pytest.mark.parametrize("content", [None, ""])
def test_empty_reply_is_one_unknown_segment(content):
    segments = diarizer_for(content).identify_speakers(CONVERSATION)

    assert segments == [SpeakerSegment(speaker="Unknown", text=CONVERSATION)]


def test_short_transcript_with_garbage_reply_is_one_unknown_segment():
    transcript = "Hello there. General Kenobi."

    segments = diarizer_for("garbage").identify_speakers(transcript)

    assert segments == [SpeakerSegment(speaker="Unknown", text=transcript)]


def test_llm_failure_is_one_unknown_segment():
    segments = diarizer_for(error=LLMServiceError("timeout")).identify_speakers(CONVERSATION)

    assert segments == [SpeakerSegment(speaker="Unknown", text=CONVERSATION)]


def test_failure_inside_recovery_is_one_unknown_segment():
    class BrokenStrategy(RecoveryStrategy):
        def recover(self, reply, transcript):
            raise RuntimeError("bug")

    recovery = DiarizationRecovery([BrokenStrategy()])
    diarizer = Diarizer(FakeLLM(content="[]"), "system", recovery)

    assert diarizer.identify_speakers("Some text.") == [
        SpeakerSegment(speaker="Unknown", text="Some text.")
    ]


def test_phrase_triggers_are_case_insensitive():
    strategy = TurnTakingStrategy(TurnTakingHeuristics())

    assert strategy.is_turn_change("Thank You for coming.", "It was a pleasure.")
    assert strategy.is_turn_change("We started early.", "Well, not that early.")
    assert strategy.is_turn_change("Is it done?", "It is.")
    assert not strategy.is_turn_change("We started early.", "It went fine.")


def test_turn_taking_heuristics_are_configurable():
    heuristics = TurnTakingHeuristics(
        switch_after_question=False,
        previous_sentence_phrases=(),
        current_sentence_phrases=("right",),
        speaker_labels=("Host", "Guest"),
    )
    config = DiarizationConfig(heuristics=heuristics)
    transcript = "Is it late? It is. Right, we should go."

    segments = diarizer_for("garbage", config=config).identify_speakers(transcript)

    assert segments == [
        SpeakerSegment(speaker="Host", text="Is it late? It is."),
        SpeakerSegment(speaker="Guest", text="Right, we should go."),
    ]


def test_recovery_always_returns_at_least_one_segment():
    recovery = DiarizationRecovery([], unknown_label="Nobody")

    assert recovery.recover(None, "Text.") == [SpeakerSegment(speaker="Nobody", text="Text.")]
