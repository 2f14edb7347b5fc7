"""
Unit tests for tag set construction.
"""
import pytest

from serverless_tasks.core.models import LabelCandidate, Tag
from serverless_tasks.core.services.tag_builder import build_tags
from tests.utils.mock_helpers import MockHelpers


@pytest.mark.unit
class TestBuildTags:
    """Test cases for build_tags."""

    def test_labels_map_to_tags_in_order(self):
        labels = [
            LabelCandidate(name='Cat', confidence=99.12),
            LabelCandidate(name='Pet', confidence=95.0),
            LabelCandidate(name='Animal', confidence=97.5)
        ]

        tags, dropped = build_tags(labels)

        assert tags == [
            Tag(key='Cat', value='99.12'),
            Tag(key='Pet', value='95'),
            Tag(key='Animal', value='97.5')
        ]
        assert dropped == 0

    def test_first_ten_labels_are_kept(self):
        labels = MockHelpers.create_label_candidates(12)
        # Detector order is kept even when a later label is more confident
        labels.append(LabelCandidate(name='Late', confidence=99.99))

        tags, dropped = build_tags(labels)

        assert len(tags) == 10
        assert [tag.key for tag in tags] == [f"Label{i}" for i in range(10)]
        assert 'Late' not in {tag.key for tag in tags}
        assert dropped == 3

    def test_exactly_ten_labels(self):
        tags, dropped = build_tags(MockHelpers.create_label_candidates(10))

        assert len(tags) == 10
        assert dropped == 0

    def test_empty_labels(self):
        assert build_tags([]) == ([], 0)

    def test_custom_limit(self):
        tags, dropped = build_tags(MockHelpers.create_label_candidates(4), max_tags=2)

        assert [tag.key for tag in tags] == ['Label0', 'Label1']
        assert dropped == 2

    def test_tag_value_is_confidence_text(self):
        assert Tag.from_label(LabelCandidate(name='Dog', confidence=88.0)).to_s3() == {
            'Key': 'Dog', 'Value': '88'
        }

    @pytest.mark.parametrize('confidence,text', [
        (99.99983215332031, '99.99983'),
        (87.53218841552734, '87.53219'),
        (100.0, '100'),
        (55.5, '55.5')
    ])
    def test_tag_value_uses_single_precision_digits(self, confidence, text):
        tags, _ = build_tags([LabelCandidate(name='Cat', confidence=confidence)])

        assert tags[0].value == text
