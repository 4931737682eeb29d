"""End-to-end tests for comment endpoints."""

from uuid import uuid4

from petal.domain.value import UserRole


def _submission(**overrides):
    body = {
        "author": {"name": "Lily", "email": "lily@example.com"},
        "content": "The tulips in the third photo are gorgeous.",
    }
    body.update(overrides)
    return body


class TestSubmitComment:
    """Tests for POST /posts/{post_id}/comments."""

    def test_anonymous_submission_is_pending(self, api):
        # Act
        response = api.client.post(
            f"/posts/{api.post.id}/comments", json=_submission()
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["post_id"] == str(api.post.id)
        assert "spam_score" not in data

    def test_spam_submission_still_returns_201(self, api):
        response = api.client.post(
            f"/posts/{api.post.id}/comments",
            json=_submission(content="WIN A FREE PRIZE NOW CASINO WINNER"),
        )

        assert response.status_code == 201
        assert response.json()["status"] == "spam"

    def test_unknown_post_is_404(self, api):
        response = api.client.post(f"/posts/{uuid4()}/comments", json=_submission())

        assert response.status_code == 404

    def test_invalid_email_is_400(self, api):
        response = api.client.post(
            f"/posts/{api.post.id}/comments",
            json=_submission(author={"name": "Lily", "email": "lily-at-example"}),
        )

        assert response.status_code == 400

    def test_short_content_is_400(self, api):
        response = api.client.post(
            f"/posts/{api.post.id}/comments", json=_submission(content="hi")
        )

        assert response.status_code == 400

    def test_reply_to_unknown_parent_is_404(self, api):
        response = api.client.post(
            f"/posts/{api.post.id}/comments",
            json=_submission(parent_id=str(uuid4())),
        )

        assert response.status_code == 404

    def test_unknown_mood_is_422(self, api):
        response = api.client.post(
            f"/posts/{api.post.id}/comments", json=_submission(mood="grumpy")
        )

        assert response.status_code == 422


class TestCommentLifecycle:
    """Submission through moderation to public listing."""

    def test_approved_comment_and_reply_are_listed(self, api):
        # Arrange
        admin = api.auth(UserRole.ADMIN)
        parent = api.client.post(
            f"/posts/{api.post.id}/comments", json=_submission()
        ).json()
        reply = api.client.post(
            f"/posts/{api.post.id}/comments",
            json=_submission(
                content="Thank you, they were planted last autumn.",
                parent_id=parent["comment_id"],
            ),
        ).json()
        pending_reply = api.client.post(
            f"/posts/{api.post.id}/comments",
            json=_submission(
                content="Still waiting on a moderator.",
                parent_id=parent["comment_id"],
            ),
        ).json()

        # Nothing is public before moderation
        listing = api.client.get(f"/posts/{api.post.id}/comments").json()
        assert listing["total"] == 0

        # Act
        for comment_id in (parent["comment_id"], reply["comment_id"]):
            response = api.client.post(
                f"/moderation/comments/{comment_id}",
                json={"action": "approve"},
                headers=admin,
            )
            assert response.status_code == 200

        # Assert
        listing = api.client.get(f"/posts/{api.post.id}/comments").json()
        assert listing["total"] == 1
        thread = listing["comments"][0]
        assert thread["comment_id"] == parent["comment_id"]
        assert thread["replies_count"] == 2
        assert [r["comment_id"] for r in thread["replies"]] == [reply["comment_id"]]
        assert pending_reply["comment_id"] not in str(thread["replies"])
        assert "author_email" not in thread


class TestToggleLike:
    """Tests for POST /comments/{comment_id}/like."""

    def test_like_requires_auth(self, api):
        comment = api.client.post(
            f"/posts/{api.post.id}/comments", json=_submission()
        ).json()

        response = api.client.post(f"/comments/{comment['comment_id']}/like")

        assert response.status_code == 401

    def test_like_toggles(self, api):
        comment = api.client.post(
            f"/posts/{api.post.id}/comments", json=_submission()
        ).json()
        headers = api.auth()

        first = api.client.post(
            f"/comments/{comment['comment_id']}/like", headers=headers
        )
        second = api.client.post(
            f"/comments/{comment['comment_id']}/like", headers=headers
        )

        assert first.status_code == 200
        assert first.json() == {
            "comment_id": comment["comment_id"],
            "liked": True,
            "likes_count": 1,
        }
        assert second.json()["liked"] is False
        assert second.json()["likes_count"] == 0

    def test_like_with_cookie(self, api):
        comment = api.client.post(
            f"/posts/{api.post.id}/comments", json=_submission()
        ).json()
        api.client.cookies.set(api.auth_settings.cookie_name, api.token())

        response = api.client.post(f"/comments/{comment['comment_id']}/like")

        assert response.status_code == 200

    def test_like_unknown_comment_is_404(self, api):
        response = api.client.post(f"/comments/{uuid4()}/like", headers=api.auth())

        assert response.status_code == 404


class TestEditComment:
    """Tests for PATCH /comments/{comment_id}."""

    def test_signed_in_author_can_edit(self, api):
        user_id = str(uuid4())
        headers = api.auth(user_id=user_id)
        comment = api.client.post(
            f"/posts/{api.post.id}/comments", json=_submission(), headers=headers
        ).json()

        response = api.client.patch(
            f"/comments/{comment['comment_id']}",
            json={"content": "Edited: the tulips were from Holland."},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json()["is_edited"] is True
        assert response.json()["content"] == "Edited: the tulips were from Holland."

    def test_other_user_gets_403(self, api):
        comment = api.client.post(
            f"/posts/{api.post.id}/comments",
            json=_submission(),
            headers=api.auth(),
        ).json()

        response = api.client.patch(
            f"/comments/{comment['comment_id']}",
            json={"content": "Someone else's words"},
            headers=api.auth(),
        )

        assert response.status_code == 403

    def test_edit_requires_auth(self, api):
        response = api.client.patch(
            f"/comments/{uuid4()}", json={"content": "Anonymous edit"}
        )

        assert response.status_code == 401

    def test_invalid_token_is_401(self, api):
        response = api.client.patch(
            f"/comments/{uuid4()}",
            json={"content": "Anonymous edit"},
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 401
