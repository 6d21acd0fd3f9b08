"""Testes para AlbumRelayCoordinator.

Valida:
- pai entregue antes de qualquer item
- contagens esperadas de imagem/vídeo
- ordem dos itens e associação com a chave do pai
- fail-fast em falha de upload ou relay
"""

from __future__ import annotations

import pytest

from app.coordinators.whatsapp.relay.album import AlbumRelayCoordinator
from app.domain.content import AlbumContent
from app.protocols.models import AlbumRelayResult, MessageKey, QuotedMessage
from tests.fakes.fake_whatsapp import FakeMessageGenerator, FakeRelay, FakeUploader
from utils.errors import EmptyInputError, MediaUploadError, MissingFieldError, RelayError

CHAT_ID = "120363000000@g.us"


def _album(*items: dict) -> AlbumContent:
    return AlbumContent.model_validate({"items": list(items)})


def _coordinator(
    generator: FakeMessageGenerator,
    relay: FakeRelay,
) -> AlbumRelayCoordinator:
    return AlbumRelayCoordinator(generator=generator, relay=relay, uploader=FakeUploader())


@pytest.fixture
def three_items() -> AlbumContent:
    return _album(
        {"image": "https://cdn/a.jpg", "caption": "A"},
        {"video": "https://cdn/b.mp4", "caption": "B"},
        {"image": b"\xff\xd8", "caption": "C"},
    )


class TestAlbumOrdering:
    """Ordem de relays e associação pai/filho."""

    @pytest.mark.asyncio
    async def test_parent_relayed_before_children(self, three_items: AlbumContent) -> None:
        """Primeiro relay é o pai; nenhum item é gerado antes dele."""
        events: list = []
        generator = FakeMessageGenerator(events=events)
        relay = FakeRelay(events=events)

        result = await _coordinator(generator, relay).send(three_items, CHAT_ID)

        kinds = [name for name, _ in events]
        assert kinds[:2] == ["from_content", "relay"]
        assert kinds.index("item") > kinds.index("relay")
        assert relay.calls[0]["message_id"] == result.parent.key.id
        assert len(relay.calls) == 4

    @pytest.mark.asyncio
    async def test_each_child_relayed_before_next_is_generated(
        self, three_items: AlbumContent
    ) -> None:
        """Itens são sequenciais: gerar, relay, próximo."""
        events: list = []
        coordinator = _coordinator(
            FakeMessageGenerator(events=events), FakeRelay(events=events)
        )

        await coordinator.send(three_items, CHAT_ID)

        kinds = [name for name, _ in events]
        assert kinds == ["from_content", "relay", "item", "relay", "item", "relay", "item", "relay"]

    @pytest.mark.asyncio
    async def test_expected_counts(self, three_items: AlbumContent) -> None:
        """Pai declara 2 imagens e 1 vídeo."""
        generator = FakeMessageGenerator()

        result = await _coordinator(generator, FakeRelay()).send(three_items, CHAT_ID)

        album = result.parent.message["albumMessage"]
        assert album == {"expectedImageCount": 2, "expectedVideoCount": 1}
        assert len(result.parent.message["messageContextInfo"]["messageSecret"]) == 32
        assert generator.from_content_calls[0]["user_jid"] == CHAT_ID

    @pytest.mark.asyncio
    async def test_children_in_input_order(self, three_items: AlbumContent) -> None:
        """Itens saem na ordem de entrada com seus descritores."""
        generator = FakeMessageGenerator()
        relay = FakeRelay()

        result = await _coordinator(generator, relay).send(three_items, CHAT_ID)

        captions = [
            next(iter(child.message.values()))["caption"] for child in result.children
        ]
        assert captions == ["A", "B", "C"]
        assert generator.item_descriptors == [
            {"image": {"url": "https://cdn/a.jpg"}, "caption": "A"},
            {"video": {"url": "https://cdn/b.mp4"}, "caption": "B"},
            {"image": b"\xff\xd8", "caption": "C"},
        ]
        assert [call["message_id"] for call in relay.calls[1:]] == [
            child.key.id for child in result.children
        ]

    @pytest.mark.asyncio
    async def test_item_with_both_slots_counts_and_sends_image_only(self) -> None:
        """Item com imagem e vídeo conta como imagem e gera só a imagem."""
        generator = FakeMessageGenerator()
        album = _album({"image": "https://cdn/a.jpg", "video": "https://cdn/a.mp4"})

        result = await _coordinator(generator, FakeRelay()).send(album, CHAT_ID)

        assert result.parent.message["albumMessage"] == {
            "expectedImageCount": 1,
            "expectedVideoCount": 0,
        }
        assert generator.item_descriptors == [{"image": {"url": "https://cdn/a.jpg"}}]

    @pytest.mark.asyncio
    async def test_children_reference_parent_key(self, three_items: AlbumContent) -> None:
        """Cada item associa o pai via parentMessageKey e cita o pai no relay."""
        relay = FakeRelay()

        result = await _coordinator(FakeMessageGenerator(), relay).send(three_items, CHAT_ID)

        assert isinstance(result, AlbumRelayResult)
        assert result.key == result.parent.key
        for child, call in zip(result.children, relay.calls[1:], strict=True):
            association = child.message["messageContextInfo"]["messageAssociation"]
            assert association == {
                "associationType": 1,
                "parentMessageKey": result.parent.key.to_wire(),
            }
            assert child.message["forwardedNewsletterMessageInfo"]["newsletterJid"] == "0@newsletter"
            assert call["quoted"] is result.parent
        assert relay.calls[0]["quoted"] is None

    @pytest.mark.asyncio
    async def test_every_message_has_distinct_secret(self, three_items: AlbumContent) -> None:
        """Pai e cada item recebem messageSecret distinto."""
        result = await _coordinator(FakeMessageGenerator(), FakeRelay()).send(
            three_items, CHAT_ID
        )

        secrets = [result.parent.message["messageContextInfo"]["messageSecret"]]
        secrets += [
            child.message["messageContextInfo"]["messageSecret"] for child in result.children
        ]
        assert len(set(secrets)) == 4

    @pytest.mark.asyncio
    async def test_quoted_goes_to_parent_generation(self) -> None:
        """Mensagem citada é repassada à geração do pai sem alteração."""
        quoted = QuotedMessage(key=MessageKey(remote_jid=CHAT_ID, id="Q1"), message={"conversation": "oi"})
        generator = FakeMessageGenerator()

        await _coordinator(generator, FakeRelay()).send(
            _album({"image": "https://cdn/a.jpg"}), CHAT_ID, quoted
        )

        assert generator.from_content_calls[0]["quoted"] is quoted
        assert quoted.message == {"conversation": "oi"}


class TestAlbumValidation:
    """Entradas inválidas não emitem relay."""

    @pytest.mark.asyncio
    async def test_empty_album_raises_without_relay(self) -> None:
        """Álbum vazio levanta EmptyInputError e não emite nenhum relay."""
        generator = FakeMessageGenerator()
        relay = FakeRelay()

        with pytest.raises(EmptyInputError):
            await _coordinator(generator, relay).send(_album(), CHAT_ID)

        assert relay.calls == []
        assert generator.from_content_calls == []

    @pytest.mark.asyncio
    async def test_item_without_media_raises_before_parent(self) -> None:
        """Item sem imagem nem vídeo falha antes de qualquer relay."""
        relay = FakeRelay()
        content = _album({"image": "https://cdn/a.jpg"}, {"caption": "sem mídia"})

        with pytest.raises(MissingFieldError) as exc_info:
            await _coordinator(FakeMessageGenerator(), relay).send(content, CHAT_ID)

        assert exc_info.value.kind == "album"
        assert relay.calls == []


class TestAlbumFailFast:
    """Falhas interrompem o álbum sem desfazer relays já emitidos."""

    @pytest.mark.asyncio
    async def test_item_upload_failure_stops_remaining(self, three_items: AlbumContent) -> None:
        """Falha no segundo item: pai e primeiro item entregues, terceiro nunca gerado."""
        generator = FakeMessageGenerator(fail_item_at=1)
        relay = FakeRelay()

        with pytest.raises(MediaUploadError):
            await _coordinator(generator, relay).send(three_items, CHAT_ID)

        assert len(relay.calls) == 2
        assert len(generator.item_descriptors) == 2

    @pytest.mark.asyncio
    async def test_parent_relay_failure_skips_children(self, three_items: AlbumContent) -> None:
        """Falha no relay do pai: nenhum item é gerado."""
        generator = FakeMessageGenerator()
        relay = FakeRelay(fail_on_call=0)

        with pytest.raises(RelayError) as exc_info:
            await _coordinator(generator, relay).send(three_items, CHAT_ID)

        assert exc_info.value.kind == "album"
        assert generator.item_descriptors == []

    @pytest.mark.asyncio
    async def test_child_relay_failure_stops_remaining(self, three_items: AlbumContent) -> None:
        """Falha no relay do primeiro item interrompe os demais."""
        generator = FakeMessageGenerator()
        relay = FakeRelay(fail_on_call=1)

        with pytest.raises(RelayError):
            await _coordinator(generator, relay).send(three_items, CHAT_ID)

        assert len(relay.calls) == 2
        assert len(generator.item_descriptors) == 1
