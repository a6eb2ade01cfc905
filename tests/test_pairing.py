"""Tests for paircommit.pairing module."""

import pytest

from paircommit.config import CommitConfig
from paircommit.exceptions import PairingError, RosterError
from paircommit.pairing import default_partner, get_pair, resolve_self
from paircommit.roster import TeamMember, load_roster


class TestResolveSelf:
    """Tests for resolve_self function."""

    def test_known_user_is_returned(self, commit_config, sample_roster, john, mocker):
        """Test that a registered user is found without prompting."""
        mock_prompt = mocker.patch("paircommit.pairing.prompt_text_non_empty")

        me, roster = resolve_self(commit_config, sample_roster)

        assert me == john
        assert roster == sample_roster
        mock_prompt.assert_not_called()

    def test_unknown_user_is_registered(self, temp_dir, mocker):
        """Test that the current user is added to the roster on first use."""
        path = temp_dir / "team.yaml"
        config = CommitConfig(team_members_path=path, abbreviation="jd")
        mocker.patch(
            "paircommit.pairing.prompt_text_non_empty",
            side_effect=["John Doe", "john.doe@example.com"],
        )

        me, roster = resolve_self(config, [])

        assert me == TeamMember(abbreviation="jd", name="John Doe", email="john.doe@example.com")
        assert roster == [me]
        assert load_roster(path) == [me]

    def test_registration_keeps_existing_members(self, roster_file, sample_roster, mocker):
        """Test that registering appends after existing members."""
        config = CommitConfig(team_members_path=roster_file, abbreviation="cc")
        mocker.patch(
            "paircommit.pairing.prompt_text_non_empty",
            side_effect=["Carol Chen", "carol@example.com"],
        )

        me, roster = resolve_self(config, sample_roster)

        assert roster[:2] == sample_roster
        assert roster[2] == me
        assert load_roster(roster_file) == roster

    def test_write_errors_propagate(self, commit_config, mocker):
        """Test that a failing save is not swallowed."""
        config = CommitConfig(team_members_path=commit_config.team_members_path, abbreviation="cc")
        mocker.patch(
            "paircommit.pairing.prompt_text_non_empty",
            side_effect=["Carol Chen", "carol@example.com"],
        )
        mocker.patch("paircommit.pairing.append_member", side_effect=RosterError("disk full"))

        with pytest.raises(RosterError):
            resolve_self(config, [])


class TestDefaultPartner:
    """Tests for default_partner function."""

    def test_previous_partner_offered(self, john, sample_roster):
        """Test that the other half of the last pair is the default."""
        assert default_partner(john, ["jd", "ab"], sample_roster) == "ab"

    def test_order_does_not_matter(self, john, sample_roster):
        """Test that the user may be second in the stored pair."""
        assert default_partner(john, ["ab", "jd"], sample_roster) == "ab"

    @pytest.mark.parametrize("previous", [[], ["jd"], ["ab"], ["ab", "cc"], ["jd", "jd"]])
    def test_no_default(self, john, sample_roster, previous):
        """Test pairs that cannot provide a default."""
        assert default_partner(john, previous, sample_roster) == ""

    def test_partner_removed_from_roster(self, john):
        """Test that a partner no longer in the roster is not offered."""
        assert default_partner(john, ["jd", "ab"], [john]) == ""


class TestGetPair:
    """Tests for get_pair function."""

    def test_accepts_previous_partner(self, commit_config, sample_roster, john, alice, mocker):
        """Test confirming the stored partner."""
        mock_prompt = mocker.patch(
            "paircommit.pairing.prompt_text_with_default",
            side_effect=lambda label, default: default,
        )

        pair = get_pair(commit_config, ["jd", "ab"], sample_roster)

        assert pair == [john, alice]
        assert mock_prompt.call_args[0][1] == "ab"

    def test_prompts_without_previous_pair(self, commit_config, sample_roster, john, alice, mocker):
        """Test choosing a partner on the first run."""
        mocker.patch("paircommit.pairing.prompt_text_non_empty", return_value="ab")

        assert get_pair(commit_config, [], sample_roster) == [john, alice]

    def test_self_is_always_first(self, commit_config, sample_roster, john, alice, mocker):
        """Test deterministic self-first ordering."""
        mocker.patch(
            "paircommit.pairing.prompt_text_with_default",
            side_effect=lambda label, default: default,
        )

        pair = get_pair(commit_config, ["ab", "jd"], sample_roster)

        assert [m.abbreviation for m in pair] == ["jd", "ab"]

    def test_override_default(self, commit_config, sample_roster, john, mocker):
        """Test typing another partner instead of the default."""
        carol = TeamMember(abbreviation="cc", name="Carol Chen", email="carol@example.com")
        mocker.patch("paircommit.pairing.prompt_text_with_default", return_value="cc")

        pair = get_pair(commit_config, ["jd", "ab"], sample_roster + [carol])

        assert pair == [john, carol]

    def test_unknown_partner_is_fatal(self, commit_config, sample_roster, mocker):
        """Test that an unknown partner is not auto-registered."""
        mocker.patch("paircommit.pairing.prompt_text_non_empty", return_value="zz")

        with pytest.raises(PairingError) as exc_info:
            get_pair(commit_config, [], sample_roster)

        assert "Unknown team member 'zz'" in str(exc_info.value)
        assert load_roster(commit_config.team_members_path) == sample_roster

    def test_pairing_with_yourself_is_fatal(self, commit_config, sample_roster, mocker):
        """Test that both halves must differ."""
        mocker.patch("paircommit.pairing.prompt_text_non_empty", return_value="jd")

        with pytest.raises(PairingError):
            get_pair(commit_config, [], sample_roster)

    def test_empty_answer_is_fatal(self, commit_config, sample_roster, mocker):
        """Test that clearing the default does not give a partial pair."""
        mocker.patch("paircommit.pairing.prompt_text_with_default", return_value="")

        with pytest.raises(PairingError):
            get_pair(commit_config, ["jd", "ab"], sample_roster)

    def test_unregistered_self_is_fatal(self, commit_config, alice, mocker):
        """Test that the current user must already be in the roster."""
        with pytest.raises(PairingError):
            get_pair(commit_config, [], [alice])
