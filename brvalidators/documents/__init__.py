from brvalidators.documents import cnpj, cpf, judicial_process, nup17, titulo_eleitor

__all__ = [
    "cnpj",
    "cpf",
    "judicial_process",
    "nup17",
    "titulo_eleitor",
]
