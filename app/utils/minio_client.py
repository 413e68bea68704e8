# app/utils/minio_client.py

import io
import json
import uuid
from typing import Optional
from urllib.parse import urlparse

from minio import Minio
from slugify import slugify

from app.config.settings import (
    MINIO_BUCKET,
    MINIO_ENDPOINT,
    MINIO_PUBLIC_ENDPOINT,
    MINIO_ROOT_PASSWORD,
    MINIO_ROOT_USER,
)
from app.core.exceptions import StorageError
from app.utils.logger import logger


def criar_cliente_minio() -> Minio:
    """Cria um cliente MinIO com as configurações do ambiente."""
    return Minio(
        endpoint=MINIO_ENDPOINT,
        access_key=MINIO_ROOT_USER,
        secret_key=MINIO_ROOT_PASSWORD,
        secure=MINIO_ENDPOINT.startswith("https")
    )


# Cliente MinIO global (lazy initialization)
client = None


def get_minio_client() -> Minio:
    """Obtém o cliente MinIO, criando se necessário."""
    global client
    if client is None:
        client = criar_cliente_minio()
    return client


def configurar_permissoes_bucket(minio: Minio, bucket_name: str) -> None:
    """Libera download público dos objetos do bucket (as URLs das fotos são públicas)."""
    policy = {
        "Version": "2012-10-17",
        "Statement": [
            {
                "Effect": "Allow",
                "Principal": "*",
                "Action": "s3:GetObject",
                "Resource": f"arn:aws:s3:::{bucket_name}/*"
            }
        ]
    }
    minio.set_bucket_policy(bucket_name, json.dumps(policy))
    logger.info(f"[MinIO] Permissões públicas configuradas para bucket: {bucket_name}")


class FotoStorage:
    """
    Armazena fotos de clientes no MinIO e devolve a URL pública.
    Injetado via dependency (`get_foto_storage`) para ser trocado nos testes.
    """

    def __init__(self, minio: Optional[Minio] = None, bucket_name: str = MINIO_BUCKET):
        self._minio = minio
        self.bucket_name = bucket_name

    @property
    def minio(self) -> Minio:
        if self._minio is None:
            self._minio = get_minio_client()
        return self._minio

    def _garantir_bucket(self) -> None:
        if not self.minio.bucket_exists(self.bucket_name):
            logger.info(f"[MinIO] Criando bucket: {self.bucket_name}")
            self.minio.make_bucket(self.bucket_name)
            configurar_permissoes_bucket(self.minio, self.bucket_name)

    def upload_foto_cliente(self, conteudo: bytes, nome: str) -> str:
        object_key = f"clientes/{slugify(nome or 'cliente')[:40]}-{uuid.uuid4()}.jpg"
        logger.info(f"[MinIO] Upload foto - bucket={self.bucket_name} key={object_key} bytes={len(conteudo)}")

        try:
            self._garantir_bucket()
            self.minio.put_object(
                bucket_name=self.bucket_name,
                object_name=object_key,
                data=io.BytesIO(conteudo),
                length=len(conteudo),
                content_type="image/jpeg",
            )
        except Exception as e:
            logger.error(f"[MinIO] Erro no upload: {e}")
            raise StorageError() from e

        url = f"{MINIO_PUBLIC_ENDPOINT}/{self.bucket_name}/{object_key}"
        logger.info(f"[MinIO] URL gerada: {url}")
        return url

    def remover(self, file_url: Optional[str]) -> bool:
        """
        Remove a foto antiga baseada na URL.
        Retorna True se removido com sucesso, False caso contrário (a troca de foto não falha por isso).
        """
        if not file_url:
            return False

        path_parts = [p for p in urlparse(file_url).path.split("/") if p]
        if len(path_parts) < 2:
            logger.error(f"[MinIO] Caminho inválido para remover do MinIO: {file_url}")
            return False

        bucket_name = path_parts[0]
        object_key = "/".join(path_parts[1:])
        try:
            self.minio.remove_object(bucket_name, object_key)
        except Exception as e:
            logger.warning(f"[MinIO] Falha ao remover arquivo antigo: {e} | url={file_url}")
            return False

        logger.info(f"[MinIO] Arquivo removido - bucket: {bucket_name}, key: {object_key}")
        return True


def get_foto_storage() -> FotoStorage:
    return FotoStorage()
