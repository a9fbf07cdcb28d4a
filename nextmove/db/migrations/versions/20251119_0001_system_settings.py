from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '20251119_0001'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('system_settings',
        sa.Column('key', sa.String(64), primary_key=True),
        sa.Column('value', sa.JSON()),
        sa.Column('updated_at', sa.DateTime, server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False)
    )

def downgrade():
    op.drop_table('system_settings')
