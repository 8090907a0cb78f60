"""End-to-end tests for asking, answering, voting and accepting."""

from uuid import uuid4

from tests.harness import create_client_fixture

client = create_client_fixture()


def _auth(client, username: str) -> dict[str, str]:
    response = client.post(
        "/api/auth/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": "secret123",
        },
    )
    return {"Authorization": f"Bearer {response.json()['token']}"}


def _ask(client, headers, title="How do I reverse a list?", tags=None):
    return client.post(
        "/api/questions",
        json={
            "title": title,
            "content": "A loop feels clumsy.",
            "tags": tags or ["python"],
        },
        headers=headers,
    )


def _answer(client, headers, question_id, content="Use items[::-1]"):
    return client.post(
        "/api/answers",
        json={"question_id": question_id, "content": content},
        headers=headers,
    )


class TestQuestions:
    """Question lifecycle over HTTP."""

    def test_create_and_read_question(self, client):
        """Reading a question counts views and shows the author."""
        # Arrange
        alice = _auth(client, "alice")

        # Act
        created = _ask(client, alice, tags=["python", "sql"])
        question_id = created.json()["id"]
        client.get(f"/api/questions/{question_id}")
        fetched = client.get(f"/api/questions/{question_id}")

        # Assert
        assert created.status_code == 201
        assert fetched.status_code == 200
        data = fetched.json()
        assert data["views"] == 2
        assert data["tags"] == ["python", "sql"]
        assert data["author"]["username"] == "alice"
        assert data["has_accepted_answer"] is False

    def test_asking_requires_authentication(self, client):
        """Anonymous users can't ask."""
        response = _ask(client, {})

        assert response.status_code == 401

    def test_unknown_tag_is_bad_request(self, client):
        """Tags have to exist."""
        alice = _auth(client, "alice")

        response = _ask(client, alice, tags=["cobol"])

        assert response.status_code == 400
        assert "cobol" in response.json()["message"]

    def test_too_many_tags_is_bad_request(self, client):
        """At most five tags per question."""
        alice = _auth(client, "alice")

        response = _ask(
            client, alice, tags=["python", "sql", "css", "html", "react", "typescript"]
        )

        assert response.status_code == 400

    def test_malformed_id_is_bad_request(self, client):
        """Non-UUID identifiers are rejected before any lookup."""
        response = client.get("/api/questions/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    def test_missing_question_is_not_found(self, client):
        """Unknown questions give a 404 with the common error body."""
        response = client.get(
            f"/api/questions/{uuid4()}", headers={"X-Request-ID": "req-123"}
        )

        assert response.status_code == 404
        assert response.json() == {
            "error": "not_found",
            "message": "Question not found",
            "request_id": "req-123",
        }
        assert response.headers["X-Request-ID"] == "req-123"

    def test_listing_filters_and_paginates(self, client):
        """Listings are newest first and filterable by tag."""
        # Arrange
        alice = _auth(client, "alice")
        _ask(client, alice, title="First python question")
        _ask(client, alice, title="A css question", tags=["css"])
        _ask(client, alice, title="Second python question")

        # Act
        python = client.get("/api/questions", params={"tag": "python", "limit": 1})

        # Assert
        assert python.status_code == 200
        data = python.json()
        assert data["pagination"] == {
            "total_count": 2,
            "total_pages": 2,
            "current_page": 1,
            "limit": 1,
        }
        assert [q["title"] for q in data["questions"]] == ["Second python question"]


    def test_page_beyond_limit_is_bad_request(self, client):
        """Huge page numbers are refused before they reach the database."""
        response = client.get("/api/questions", params={"page": 10**30})

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
    def test_only_author_edits_and_deletes(self, client):
        """Other users get 403; the author's edit replaces tags."""
        # Arrange
        alice = _auth(client, "alice")
        bob = _auth(client, "bob")
        question_id = _ask(client, alice).json()["id"]
        edit = {"title": "Reversing a tuple", "content": "Immutable.", "tags": ["sql"]}

        # Act
        forbidden_edit = client.put(
            f"/api/questions/{question_id}", json=edit, headers=bob
        )
        forbidden_delete = client.delete(f"/api/questions/{question_id}", headers=bob)
        edited = client.put(f"/api/questions/{question_id}", json=edit, headers=alice)

        # Assert
        assert forbidden_edit.status_code == 403
        assert forbidden_edit.json()["error"] == "forbidden"
        assert forbidden_delete.status_code == 403
        assert edited.status_code == 200
        assert edited.json()["title"] == "Reversing a tuple"
        assert edited.json()["tags"] == ["sql"]

    def test_delete_removes_question_and_answers(self, client):
        """Deleting a question takes its answers along."""
        # Arrange
        alice = _auth(client, "alice")
        bob = _auth(client, "bob")
        question_id = _ask(client, alice).json()["id"]
        answer_id = _answer(client, bob, question_id).json()["id"]

        # Act
        deleted = client.delete(f"/api/questions/{question_id}", headers=alice)

        # Assert
        assert deleted.status_code == 204
        assert client.get(f"/api/questions/{question_id}").status_code == 404
        orphan_vote = client.post(
            "/api/votes", json={"votable_id": answer_id, "vote_type": 1}, headers=bob
        )
        assert orphan_vote.status_code == 404


class TestAnswersAndAcceptance:
    """Answering and accepting over HTTP."""

    def test_accepting_moves_between_answers(self, client):
        """Only one answer is accepted at a time, listed first."""
        # Arrange
        alice = _auth(client, "alice")
        bob = _auth(client, "bob")
        carol = _auth(client, "carol")
        question_id = _ask(client, alice).json()["id"]
        first = _answer(client, bob, question_id, "Slicing").json()["id"]
        second = _answer(client, carol, question_id, "reversed()").json()["id"]

        # Act
        client.patch(f"/api/answers/{first}/accept", headers=alice)
        accepted = client.patch(f"/api/answers/{second}/accept", headers=alice)
        answers = client.get(f"/api/questions/{question_id}/answers").json()["answers"]
        question = client.get(f"/api/questions/{question_id}").json()

        # Assert
        assert accepted.status_code == 200
        assert accepted.json()["is_accepted"] is True
        assert [(a["id"], a["is_accepted"]) for a in answers] == [
            (second, True),
            (first, False),
        ]
        assert question["has_accepted_answer"] is True

    def test_only_question_author_accepts(self, client):
        """The answer's own author can't accept it."""
        # Arrange
        alice = _auth(client, "alice")
        bob = _auth(client, "bob")
        question_id = _ask(client, alice).json()["id"]
        answer_id = _answer(client, bob, question_id).json()["id"]

        # Act
        response = client.patch(f"/api/answers/{answer_id}/accept", headers=bob)

        # Assert
        assert response.status_code == 403

    def test_answer_to_missing_question_is_not_found(self, client):
        """Answers need an existing question."""
        bob = _auth(client, "bob")

        response = _answer(client, bob, str(uuid4()))

        assert response.status_code == 404

    def test_blank_answer_edit_is_bad_request(self, client):
        """Edits obey the same content rules as new answers."""
        # Arrange
        alice = _auth(client, "alice")
        bob = _auth(client, "bob")
        question_id = _ask(client, alice).json()["id"]
        answer_id = _answer(client, bob, question_id).json()["id"]

        # Act
        response = client.put(
            f"/api/answers/{answer_id}", json={"content": ""}, headers=bob
        )

        # Assert
        assert response.status_code == 400

    def test_delete_answer(self, client):
        """Authors can delete their answers."""
        # Arrange
        alice = _auth(client, "alice")
        bob = _auth(client, "bob")
        question_id = _ask(client, alice).json()["id"]
        answer_id = _answer(client, bob, question_id).json()["id"]

        # Act
        forbidden = client.delete(f"/api/answers/{answer_id}", headers=alice)
        deleted = client.delete(f"/api/answers/{answer_id}", headers=bob)

        # Assert
        assert forbidden.status_code == 403
        assert deleted.status_code == 204
        answers = client.get(f"/api/questions/{question_id}/answers").json()["answers"]
        assert answers == []


class TestVoting:
    """Voting over HTTP."""

    def test_toggle_flip_and_revoke(self, client):
        """Votes toggle, flip, and can be revoked by ID."""
        # Arrange
        alice = _auth(client, "alice")
        bob = _auth(client, "bob")
        question_id = _ask(client, alice).json()["id"]

        def vote(vote_type):
            return client.post(
                "/api/votes",
                json={
                    "votable_id": question_id,
                    "votable_type": "question",
                    "vote_type": vote_type,
                },
                headers=bob,
            )

        # Act & Assert
        up = vote(1).json()
        assert (up["new_vote_type"], up["total_votes"]) == (1, 1)

        off = vote(1).json()
        assert (off["new_vote_type"], off["total_votes"]) == (0, 0)
        assert off["vote_id"] is None

        vote(1)
        flipped = vote(-1).json()
        assert (flipped["new_vote_type"], flipped["total_votes"]) == (-1, -1)

        seen = client.get(f"/api/questions/{question_id}", headers=bob).json()
        assert seen["user_vote"] == {"id": flipped["vote_id"], "vote_type": -1}

        forbidden = client.delete(f"/api/votes/{flipped['vote_id']}", headers=alice)
        assert forbidden.status_code == 403

        revoked = client.delete(f"/api/votes/{flipped['vote_id']}", headers=bob)
        assert revoked.status_code == 200
        assert revoked.json()["total_votes"] == 0

        again = client.delete(f"/api/votes/{flipped['vote_id']}", headers=bob)
        assert again.status_code == 404

    def test_invalid_vote_type_is_bad_request(self, client):
        """Only 1 and -1 are valid directions."""
        alice = _auth(client, "alice")
        question_id = _ask(client, alice).json()["id"]

        response = client.post(
            "/api/votes",
            json={"votable_id": question_id, "vote_type": 2},
            headers=alice,
        )

        assert response.status_code == 400


    def test_vote_type_must_be_an_exact_integer(self, client):
        """Booleans and floats are not coerced into a direction."""
        alice = _auth(client, "alice")
        question_id = _ask(client, alice).json()["id"]

        for vote_type in (True, 1.0, "1"):
            response = client.post(
                "/api/votes",
                json={"votable_id": question_id, "vote_type": vote_type},
                headers=alice,
            )
            assert response.status_code == 400

        stored = client.get(f"/api/questions/{question_id}").json()
        assert stored["votes"] == 0
    def test_answer_vote_without_type(self, client):
        """The item kind is looked up when not given."""
        # Arrange
        alice = _auth(client, "alice")
        bob = _auth(client, "bob")
        question_id = _ask(client, alice).json()["id"]
        answer_id = _answer(client, bob, question_id).json()["id"]

        # Act
        response = client.post(
            "/api/votes", json={"votable_id": answer_id, "vote_type": 1}, headers=alice
        )
        answers = client.get(f"/api/questions/{question_id}/answers").json()["answers"]

        # Assert
        assert response.json()["votable_type"] == "answer"
        assert answers[0]["votes"] == 1


class TestTagsAndStats:
    """Tag listing, stats and health over HTTP."""

    def test_tags_and_stats(self, client):
        """Usage counts and resolution reflect the forum's state."""
        # Arrange
        alice = _auth(client, "alice")
        bob = _auth(client, "bob")
        resolved = _ask(client, alice, tags=["python", "sql"]).json()["id"]
        _ask(client, alice, tags=["python"])
        answer_id = _answer(client, bob, resolved).json()["id"]
        client.patch(f"/api/answers/{answer_id}/accept", headers=alice)

        # Act
        tags = client.get("/api/tags").json()["tags"]
        stats = client.get("/api/stats").json()

        # Assert
        assert [t["name"] for t in tags[:2]] == ["python", "sql"]
        assert tags[0]["usage_count"] == 2
        assert len(tags) == 8
        assert stats == {"total": 2, "resolution": 50, "active_tags": 2}

    def test_health(self, client):
        """Health check answers without a database round trip."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
