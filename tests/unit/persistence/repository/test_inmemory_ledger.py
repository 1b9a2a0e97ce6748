"""Unit tests for the in-memory vote ledger and its transaction primitives."""

from datetime import datetime
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from featurevote.domain.error import ConflictError
from featurevote.domain.model import Vote
from featurevote.domain.value import FeatureId, UserId, VoteId
from featurevote.persistence.repository.inmemory import (
    InMemoryFeatureRepository,
    InMemoryUserRepository,
    InMemoryVoteLedger,
    InMemoryVoteRepository,
)
from tests.conftest import make_feature, make_user


def make_vote(user_id: UserId, feature_id: FeatureId) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        user_id=user_id,
        feature_id=feature_id,
        created_at=datetime.now(),
    )


@pytest.fixture
def stores():
    return InMemoryVoteRepository(), InMemoryFeatureRepository()


@pytest.fixture
def ledger(stores):
    votes, features = stores
    return InMemoryVoteLedger(vote_repository=votes, feature_repository=features)


class TestInMemoryVoteLedger:
    """Tests for InMemoryVoteLedger."""

    @pytest.mark.asyncio
    async def test_commit_keeps_changes(self, ledger, stores):
        votes, features = stores
        user = make_user()
        feature = await features.save(make_feature(user))
        vote = make_vote(user.id, feature.id)

        async with ledger.transaction(user.id) as tx:
            summary = await tx.create_vote_and_increment(vote)

        assert summary.vote_count == 1
        assert await votes.find_by_user(user.id) == vote

    @pytest.mark.asyncio
    async def test_exception_rolls_back_every_write(self, ledger, stores):
        """Writes made before an error inside the unit are undone."""
        votes, features = stores
        user = make_user()
        feature = await features.save(make_feature(user))

        with pytest.raises(RuntimeError):
            async with ledger.transaction(user.id) as tx:
                await tx.create_vote_and_increment(make_vote(user.id, feature.id))
                raise RuntimeError("boom")

        assert await votes.find_by_user(user.id) is None
        assert (await features.find_by_id(feature.id)).vote_count == 0

    @pytest.mark.asyncio
    async def test_duplicate_vote_is_a_conflict(self, ledger, stores):
        """A second vote row for one user becomes ConflictError and rolls back."""
        votes, features = stores
        user = make_user()
        first = await features.save(make_feature(user))
        second = await features.save(make_feature(user, "Calendar Integration"))
        async with ledger.transaction(user.id) as tx:
            await tx.create_vote_and_increment(make_vote(user.id, first.id))

        with pytest.raises(ConflictError):
            async with ledger.transaction(user.id) as tx:
                await tx.create_vote_and_increment(make_vote(user.id, second.id))

        assert len(await votes.find_all(user_id=user.id)) == 1
        assert (await features.find_by_id(second.id)).vote_count == 0

    @pytest.mark.asyncio
    async def test_move_vote_updates_both_counters(self, ledger, stores):
        votes, features = stores
        user = make_user()
        old = await features.save(make_feature(user))
        new = await features.save(make_feature(user, "Calendar Integration"))
        old_vote = make_vote(user.id, old.id)
        async with ledger.transaction(user.id) as tx:
            await tx.create_vote_and_increment(old_vote)

        new_vote = make_vote(user.id, new.id)
        async with ledger.transaction(user.id) as tx:
            summary = await tx.move_vote(old_vote, new_vote)

        assert summary.id == new.id
        assert summary.vote_count == 1
        assert (await features.find_by_id(old.id)).vote_count == 0
        assert await votes.find_by_id(old_vote.id) is None
        assert await votes.find_by_user(user.id) == new_vote

    @pytest.mark.asyncio
    async def test_move_vote_rejects_other_user(self, ledger, stores):
        _, features = stores
        user = make_user()
        feature = await features.save(make_feature(user))

        with pytest.raises(ValueError):
            async with ledger.transaction(user.id) as tx:
                await tx.move_vote(
                    make_vote(user.id, feature.id),
                    make_vote(UserId(uuid4()), feature.id),
                )

    @pytest.mark.asyncio
    async def test_delete_without_row_returns_none(self, ledger, stores):
        """No matching row: nothing is deleted and no counter moves."""
        _, features = stores
        user = make_user()
        feature = await features.save(make_feature(user, vote_count=3))

        async with ledger.transaction(user.id) as tx:
            result = await tx.delete_vote_and_decrement(user.id, feature.id)

        assert result is None
        assert (await features.find_by_id(feature.id)).vote_count == 3

    @pytest.mark.asyncio
    async def test_find_vote_by_user_and_feature(self, ledger, stores):
        """Only the vote on the requested feature is returned."""
        _, features = stores
        user = make_user()
        voted = await features.save(make_feature(user))
        other = await features.save(make_feature(user, "Calendar Integration"))
        vote = make_vote(user.id, voted.id)

        async with ledger.transaction(user.id) as tx:
            await tx.create_vote_and_increment(vote)
            found = await tx.find_vote_by_user_and_feature(user.id, voted.id)
            missing = await tx.find_vote_by_user_and_feature(user.id, other.id)

        assert found == vote
        assert missing is None

    @pytest.mark.asyncio
    async def test_delete_vote_and_decrement_removes_matched_row(self, ledger, stores):
        votes, features = stores
        user = make_user()
        feature = await features.save(make_feature(user))
        async with ledger.transaction(user.id) as tx:
            await tx.create_vote_and_increment(make_vote(user.id, feature.id))

        async with ledger.transaction(user.id) as tx:
            summary = await tx.delete_vote_and_decrement(user.id, feature.id)

        assert summary.vote_count == 0
        assert await votes.find_by_user(user.id) is None

    @pytest.mark.asyncio
    async def test_counter_mismatch_is_a_conflict_and_rolls_back(self, ledger, stores):
        """A vote row whose counter is already 0 can't be removed silently."""
        votes, features = stores
        user = make_user()
        feature = await features.save(make_feature(user))
        vote = await votes.save(make_vote(user.id, feature.id))

        with pytest.raises(ConflictError):
            async with ledger.transaction(user.id) as tx:
                await tx.delete_vote_and_decrement(user.id, feature.id)

        assert await votes.find_by_id(vote.id) == vote
        assert (await features.find_by_id(feature.id)).vote_count == 0


class TestInMemoryRepositories:
    """Constraint behavior shared with the PostgreSQL schema."""

    @pytest.mark.asyncio
    async def test_decrement_below_zero_is_rejected(self):
        """Like the vote_count_non_negative CHECK, a zero counter can't go down."""
        features = InMemoryFeatureRepository()
        feature = await features.save(make_feature(make_user()))

        with pytest.raises(IntegrityError):
            await features.decrement_vote_count(feature.id)

        assert (await features.find_by_id(feature.id)).vote_count == 0

    @pytest.mark.asyncio
    async def test_delete_by_user_and_feature_only_matches_that_feature(self):
        votes = InMemoryVoteRepository()
        user = make_user()
        vote = await votes.save(make_vote(user.id, FeatureId(uuid4())))

        assert not await votes.delete_by_user_and_feature(user.id, FeatureId(uuid4()))
        assert await votes.delete_by_user_and_feature(user.id, vote.feature_id)
        assert await votes.find_by_user(user.id) is None

    @pytest.mark.asyncio
    async def test_save_keeps_stored_vote_count(self):
        """Updating a feature doesn't overwrite its counter."""
        features = InMemoryFeatureRepository()
        feature = await features.save(make_feature(make_user()))
        await features.increment_vote_count(feature.id)

        saved = await features.save(feature.model_copy(update={"title": "Dark Theme"}))

        assert saved.title == "Dark Theme"
        assert saved.vote_count == 1

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self):
        users = InMemoryUserRepository()
        await users.save(make_user())

        with pytest.raises(IntegrityError):
            await users.save(make_user())
