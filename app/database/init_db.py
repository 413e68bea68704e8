import logging

from sqlalchemy import text

from .db_connection import engine, Base, SessionLocal
from app.config.settings import ADMIN_EMAIL, ADMIN_NOME, ADMIN_PASSWORD, ADMIN_USERNAME
from app.core.security import hash_password
from app.utils.validadores import validar_email

logger = logging.getLogger(__name__)


def configurar_timezone():
    """Configura o timezone da sessão para America/Sao_Paulo (apenas Postgres)."""
    if engine.dialect.name != "postgresql":
        return
    try:
        with engine.begin() as conn:
            conn.execute(text("SET timezone = 'America/Sao_Paulo'"))
            timezone_atual = conn.execute(text("SHOW timezone")).scalar()
            logger.info(f"✅ Timezone do banco configurado: {timezone_atual}")
    except Exception as e:
        logger.warning(f"⚠️ Erro ao configurar timezone do banco: {e}")


def importar_models():
    # ─── Models Cadastros ────────────────────────────────────────────
    from app.api.cadastros.models.user_model import UserModel
    from app.api.cadastros.models.model_admin import AdminModel
    from app.api.cadastros.models.model_cliente import ClienteModel
    from app.api.cadastros.models.model_endereco import EnderecoModel
    from app.api.cadastros.models.model_funcionario import FuncionarioModel
    # ─── Models Catálogo ─────────────────────────────────────────────
    from app.api.catalogo.models.model_produto import ProdutoModel
    logger.info("📦 Models importados com sucesso.")


def criar_tabelas():
    importar_models()
    # checkfirst=True: não recria nem altera tabelas existentes
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("✅ create_all concluído (%s tabelas garantidas).", len(Base.metadata.tables))


def criar_admin_padrao():
    """
    Cria o primeiro admin do painel a partir de ADMIN_USERNAME/ADMIN_PASSWORD.
    Idempotente: se o username já existe, nada é alterado.
    """
    from app.api.auth.auth_repo import AuthRepository
    from app.api.cadastros.models.model_admin import AdminModel

    if not ADMIN_USERNAME or not ADMIN_PASSWORD:
        logger.info("ℹ️ ADMIN_USERNAME/ADMIN_PASSWORD não definidos; seed de admin ignorado.")
        return
    if not validar_email(ADMIN_EMAIL):
        logger.error("❌ ADMIN_EMAIL inválido; seed de admin ignorado.")
        return

    with SessionLocal() as session:
        repo = AuthRepository(session)
        if repo.get_admin_by_username(ADMIN_USERNAME):
            logger.info("ℹ️ Admin '%s' já existe.", ADMIN_USERNAME)
            return
        admin = repo.create_admin(
            AdminModel(
                username=ADMIN_USERNAME,
                senha_hash=hash_password(ADMIN_PASSWORD),
                email=ADMIN_EMAIL,
                nome=ADMIN_NOME,
                ativo=True,
            )
        )
        logger.info("✅ Seed: admin '%s' criado (id=%s).", admin.username, admin.id)


def inicializar_banco():
    logger.info("🚀 Iniciando processo de inicialização do banco de dados...")

    logger.info("📦 Passo 1/3: Configurando timezone do banco...")
    configurar_timezone()

    logger.info("📋 Passo 2/3: Criando/verificando todas as tabelas...")
    criar_tabelas()

    logger.info("🧑‍💼 Passo 3/3: Criando/verificando admin inicial...")
    criar_admin_padrao()

    logger.info("✅ Banco inicializado com sucesso.")
