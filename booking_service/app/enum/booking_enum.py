from enum import Enum


class BookingStatus(str, Enum):

    pending = "pendente"
    confirmed = "confirmada"
    cancelled = "cancelada"
    expired = "vencida"
    visit = "visita"


# Statuses the expiry sweep never rewrites
TERMINAL_STATUSES = {BookingStatus.cancelled.value, BookingStatus.expired.value}


class BookingType(str, Enum):

    paid = "paga"
    free = "gratuita"


class ApprovalStatus(str, Enum):

    pending = "pendente"
    authorized = "autorizado"
    free_cession = "cedencia_gratuita"
    not_authorized = "nao_autorizado"
    dm = "dm"


class RecordCategory(str, Enum):

    all = "all"
    process = "processo"
    visit = "visita"


class EntityStatus(str, Enum):

    active = "ativo"
    inactive = "inativo"


STATUS_LABELS = {
    BookingStatus.pending.value: "Pendente",
    BookingStatus.confirmed.value: "Confirmada",
    BookingStatus.cancelled.value: "Cancelada",
    BookingStatus.expired.value: "Aguarda Resposta",
    BookingStatus.visit.value: "Pedido de Informação",
}

APPROVAL_LABELS = {
    ApprovalStatus.pending.value: "------------",
    ApprovalStatus.authorized.value: "Autorizado",
    ApprovalStatus.free_cession.value: "Cedência Gratuita",
    ApprovalStatus.not_authorized.value: "Não Autorizado",
    ApprovalStatus.dm.value: "DM",
}
