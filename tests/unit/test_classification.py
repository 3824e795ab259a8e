"""
Unit tests for the test classification engine.
"""
import pytest
from types import SimpleNamespace

from fce.core.classification import (
    CanonicalSection,
    TestClassifier,
    TestRecord,
    classify_test,
    group_tests_by_section,
    sections_in_order,
)
from fce.core.classification.vocabulary import (
    CARDIO_PATTERN,
    DISTAL_MOVEMENT_PATTERN,
    word_pattern,
)


@pytest.fixture
def classifier():
    return TestClassifier()


class TestCanonicalSection:
    """Tests for the section enum."""

    def test_display_order(self):
        assert [s.value for s in sections_in_order()] == [
            "Strength",
            "ROM Total Spine/Extremity",
            "ROM Hand/Foot",
            "Occupational Tasks",
            "Cardio",
        ]

    def test_from_label_is_exact(self):
        assert CanonicalSection.from_label("Cardio") == CanonicalSection.CARDIO
        assert CanonicalSection.from_label("cardio") is None
        assert CanonicalSection.from_label(" Cardio") is None
        assert CanonicalSection.from_label(None) is None


class TestTestRecord:
    """Tests for record coercion."""

    def test_camel_case_mapping(self):
        record = TestRecord.from_mapping({"testName": "Grip", "testId": "grip", "testType": "strength"})
        assert record.test_name == "Grip"
        assert record.test_id == "grip"
        assert record.test_type == "strength"
        assert record.category == ""

    def test_snake_case_mapping(self):
        record = TestRecord.from_mapping({"test_name": "Grip", "test_id": "grip"})
        assert record.test_name == "Grip"
        assert record.test_id == "grip"

    def test_coerce_none_and_empty(self):
        assert TestRecord.coerce(None) == TestRecord()
        assert TestRecord.coerce({}) == TestRecord()

    def test_coerce_object_attributes(self):
        class Row:
            test_name = "Knee Flexion"
            test_id = None

        record = TestRecord.coerce(Row())
        assert record.test_name == "Knee Flexion"
        assert record.test_id == ""

    def test_coerce_camel_case_attributes(self):
        row = SimpleNamespace(testName="Bruce Treadmill Test", testId="bruce-treadmill")
        record = TestRecord.coerce(row)
        assert record.test_name == "Bruce Treadmill Test"
        assert record.test_id == "bruce-treadmill"
        assert classify_test(row) == CanonicalSection.CARDIO

    def test_none_fields_become_empty_text(self):
        record = TestRecord(test_name=None, test_id=None, category=None, test_type=None)
        assert record == TestRecord()

    def test_non_string_fields_become_text(self):
        assert TestRecord(test_id=42).test_id == "42"


class TestTotality:
    """Every input yields a section."""

    @pytest.mark.parametrize("test", [
        None, {}, TestRecord(), {"testName": None}, 42,
        TestRecord(test_name=None, test_id=None, category=None, test_type=None),
    ])
    def test_degenerate_inputs_default_to_strength(self, classifier, test):
        trace = classifier.explain(test)
        assert trace.section == CanonicalSection.STRENGTH
        assert trace.rule == "default"

    def test_record_with_none_name(self, classifier):
        trace = classifier.explain(TestRecord(test_name=None, test_id="grip-strength"))
        assert trace.section == CanonicalSection.STRENGTH
        assert trace.rule == "strength"

    def test_grouping_records_with_none_fields(self, classifier):
        tests = [TestRecord(test_name=None, test_id="bruce-treadmill"), TestRecord(test_name=None)]
        grouped = classifier.group(tests)
        assert len(grouped[CanonicalSection.CARDIO]) == 1
        assert len(grouped[CanonicalSection.STRENGTH]) == 1

    def test_unknown_protocol_defaults_to_strength(self, classifier):
        trace = classifier.explain({"testName": "Unknown Protocol"})
        assert trace.section == CanonicalSection.STRENGTH
        assert trace.rule == "default"

    def test_idempotent(self, classifier, protocol_tests):
        first = [classifier.classify(t) for t in protocol_tests]
        second = [classifier.classify(t) for t in protocol_tests]
        assert first == second


class TestExplicitCategory:
    """Category naming a section is authoritative."""

    @pytest.mark.parametrize("section", list(CanonicalSection))
    def test_override_beats_heuristics(self, classifier, section):
        test = {"testName": "Bruce Treadmill Test", "testId": "bruce-treadmill", "category": section.value}
        trace = classifier.explain(test)
        assert trace.section == section
        assert trace.rule == "explicit-category"

    def test_lowercase_category_is_not_an_override(self, classifier):
        test = {"testName": "Knee Flexion", "category": "strength"}
        assert classifier.classify(test) == CanonicalSection.ROM_SPINE_EXTREMITY

    def test_test_type_is_not_an_override(self, classifier):
        test = {"testName": "Knee Flexion", "testType": "Strength"}
        assert classifier.classify(test) == CanonicalSection.ROM_SPINE_EXTREMITY


class TestCardioRule:
    """Tests for cardio protocol detection."""

    def test_bruce(self, classifier, bruce_test):
        trace = classifier.explain(bruce_test)
        assert trace.section == CanonicalSection.CARDIO
        assert trace.rule == "cardio"

    @pytest.mark.parametrize("test_id", ["mcaft", "kasch-step", "step-test", "ymca-bike"])
    def test_protocol_ids(self, classifier, test_id):
        assert classifier.classify({"testId": test_id}) == CanonicalSection.CARDIO

    def test_cardio_beats_occupational(self, classifier):
        trace = classifier.explain({"testId": "treadmill-walk"})
        assert trace.section == CanonicalSection.CARDIO
        assert trace.rule == "cardio"

    def test_category_text_is_searched(self, classifier):
        assert classifier.classify({"testName": "Sub-max Test", "testType": "aerobic"}) == CanonicalSection.CARDIO


class TestOccupationalRule:
    """Tests for MTM task simulations."""

    @pytest.mark.parametrize("name,test_id", [
        ("Reach Overhead", "reach-overhead"),
        ("Bi-Manual Fingering", "bi-manual-fingering"),
        ("Ladder Climb", "ladder-climb"),
        ("Push/Pull Cart", "push-pull-cart"),
        ("Kneel", "kneel"),
    ])
    def test_tasks(self, classifier, name, test_id):
        trace = classifier.explain({"testName": name, "testId": test_id})
        assert trace.section == CanonicalSection.OCCUPATIONAL_TASKS
        assert trace.rule == "occupational"

    def test_rom_wording_skips_occupational(self, classifier):
        trace = classifier.explain({"testName": "Overhead Reach Shoulder Flexion"})
        assert trace.section == CanonicalSection.ROM_SPINE_EXTREMITY
        assert trace.rule == "rom-spine-extremity"


class TestRomHandFootRule:
    """Tests for distal-extremity ROM."""

    @pytest.mark.parametrize("name", [
        "Wrist Flexion/Extension",
        "Thumb MP Flexion/Extension",
        "Ankle Dorsiflexion",
        "Great Toe IP Flexion",
        "Wrist Radial/Ulnar Deviation",
    ])
    def test_distal_names(self, classifier, name):
        trace = classifier.explain({"testName": name})
        assert trace.section == CanonicalSection.ROM_HAND_FOOT
        assert trace.rule == "rom-hand-foot"

    def test_hand_foot_beats_spine_extremity(self, classifier):
        test = {"testName": "Wrist Flexion/Extension", "testId": "wrist-rom-flexion-extension"}
        assert classifier.classify(test) == CanonicalSection.ROM_HAND_FOOT

    def test_id_alone_is_not_enough(self, classifier):
        test = {"testName": "", "testId": "thumb-mp-flexion-extension"}
        assert classifier.classify(test) != CanonicalSection.ROM_HAND_FOOT

    def test_body_part_without_movement(self, classifier):
        assert classifier.classify({"testName": "Hand Strength"}) == CanonicalSection.STRENGTH

    def test_muscle_test_excluded(self, classifier):
        test = {"testName": "Wrist Flexion", "testId": "wrist-muscle-flexion"}
        assert classifier.classify(test) == CanonicalSection.STRENGTH


class TestRomSpineExtremityRule:
    """Tests for spine and proximal-joint ROM."""

    @pytest.mark.parametrize("name,test_id", [
        ("Shoulder Flexion/Extension", "shoulder-rom-flexion-extension"),
        ("Cervical Spine Flexion/Extension", "cervical-spine-flexion-extension"),
        ("Lumbar Spine Straight Leg Raise", "lumbar-spine-straight-leg-raise"),
        ("Knee Flexion", ""),
        ("Hip Internal Rotation", "hip-rom-rotation"),
    ])
    def test_spine_and_proximal(self, classifier, name, test_id):
        trace = classifier.explain({"testName": name, "testId": test_id})
        assert trace.section == CanonicalSection.ROM_SPINE_EXTREMITY
        assert trace.rule == "rom-spine-extremity"

    def test_goniometer_id(self, classifier):
        test = {"testName": "Digital Check", "testId": "goniometer-check"}
        assert classifier.classify(test) == CanonicalSection.ROM_SPINE_EXTREMITY

    def test_rom_category_text(self, classifier):
        test = {"testName": "Custom Measure", "testType": "rom"}
        assert classifier.classify(test) == CanonicalSection.ROM_SPINE_EXTREMITY

    def test_muscle_test_is_strength(self, classifier):
        trace = classifier.explain({"testName": "Shoulder Flexion", "testId": "shoulder-muscle-flexion"})
        assert trace.section == CanonicalSection.STRENGTH
        assert trace.rule == "strength"


class TestStrengthRule:
    """Tests for strength detection."""

    @pytest.mark.parametrize("name,test_id", [
        ("Grip Strength", "grip-strength"),
        ("Pinch Strength Palmar", "pinch-palmar"),
        ("Static Lift - Low", "static-lift-low"),
        ("MVIC", ""),
    ])
    def test_strength_terms(self, classifier, name, test_id):
        trace = classifier.explain({"testName": name, "testId": test_id})
        assert trace.section == CanonicalSection.STRENGTH
        assert trace.rule == "strength"


class TestGrouping:
    """Tests for grouping by section."""

    def test_all_sections_present_in_order(self, classifier):
        grouped = classifier.group([])
        assert list(grouped.keys()) == CanonicalSection.ordered()
        assert all(items == [] for items in grouped.values())

    @pytest.mark.parametrize("tests", [None, "grip-strength", {"testName": "Grip"}, 7])
    def test_non_list_input_gives_empty_grouping(self, classifier, tests):
        grouped = classifier.group(tests)
        assert list(grouped.keys()) == CanonicalSection.ordered()
        assert sum(len(v) for v in grouped.values()) == 0

    def test_protocol_grouping(self, classifier, protocol_tests):
        grouped = classifier.group(protocol_tests)

        def ids(section):
            return [t["testId"] for t in grouped[section]]

        assert ids(CanonicalSection.STRENGTH) == [
            "grip-strength", "static-lift-low", "shoulder-muscle-flexion",
        ]
        assert ids(CanonicalSection.ROM_SPINE_EXTREMITY) == [
            "shoulder-rom-flexion-extension-left", "cervical-spine-rotation",
        ]
        assert ids(CanonicalSection.ROM_HAND_FOOT) == [
            "wrist-rom-flexion-extension", "ankle-rom-dorsi-plantar-flexion",
        ]
        assert ids(CanonicalSection.OCCUPATIONAL_TASKS) == [
            "reach-overhead", "bi-manual-fingering",
        ]
        assert ids(CanonicalSection.CARDIO) == ["bruce-treadmill", "kasch-step"]

    def test_items_returned_as_given(self, classifier, grip_test):
        grouped = classifier.group([grip_test])
        assert grouped[CanonicalSection.STRENGTH][0] is grip_test

    def test_grouping_matches_single_classification(self, classifier, protocol_tests):
        grouped = group_tests_by_section(protocol_tests)
        for section, items in grouped.items():
            for test in items:
                assert classify_test(test) == section

    def test_summarise(self, classifier, protocol_tests):
        summary = classifier.summarise(classifier.group(protocol_tests))
        assert summary["total_tests"] == len(protocol_tests)
        assert summary["sections"]["Cardio"] == 2
        assert list(summary["sections"].keys()) == [s.value for s in CanonicalSection.ordered()]


class TestRegisteredRules:
    """Tests for rule introspection."""

    def test_cascade_order(self):
        assert TestClassifier.registered_rules() == [
            "explicit-category",
            "cardio",
            "occupational",
            "rom-hand-foot",
            "rom-spine-extremity",
            "strength",
        ]


class TestVocabulary:
    """Tests for keyword pattern construction."""

    def test_empty_family_rejected(self):
        with pytest.raises(ValueError):
            word_pattern([])

    def test_empty_entry_rejected(self):
        with pytest.raises(ValueError):
            word_pattern(["grip", ""])

    def test_whole_word_matching(self):
        assert CARDIO_PATTERN.search("bruce-treadmill")
        assert CARDIO_PATTERN.search("heartbeat") is None

    def test_movement_prefixes(self):
        assert DISTAL_MOVEMENT_PATTERN.search("ankle dorsiflexion")
        assert DISTAL_MOVEMENT_PATTERN.search("plantarflexion")
