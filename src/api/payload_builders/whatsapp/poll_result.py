"""Builder para snapshot de resultado de enquete."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.content import PollResultContent


class PollResultPayloadBuilder:
    """Builder de pollResultSnapshotMessage (contagens como string)."""

    def build(self, content: PollResultContent) -> dict[str, Any]:
        return {
            "pollResultSnapshotMessage": {
                "name": content.name,
                "pollVotes": [
                    {
                        "optionName": vote.option_name,
                        "optionVoteCount": (
                            None
                            if vote.option_vote_count is None
                            else str(vote.option_vote_count)
                        ),
                    }
                    for vote in content.poll_votes
                ],
            }
        }
