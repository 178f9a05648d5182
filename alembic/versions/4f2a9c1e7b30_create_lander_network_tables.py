"""create_lander_network_tables

Revision ID: 4f2a9c1e7b30
Revises:
Create Date: 2026-10-19 10:12:41.208315

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4f2a9c1e7b30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('campaigns',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('topic', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('app_id', sa.String(50), nullable=False, server_default='adseo-v2'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('keywords',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('campaign_id', sa.Integer(), nullable=False),
        sa.Column('keyword', sa.String(255), nullable=False),
        sa.Column('search_volume', sa.BigInteger(), nullable=False, server_default='0'),
        sa.Column('competition', sa.Numeric(4, 3), nullable=False, server_default='0'),
        sa.Column('cpc', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('competition_level', sa.String(10), nullable=False, server_default='LOW'),
        sa.Column('app_id', sa.String(50), nullable=False, server_default='adseo-v2'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['campaign_id'], ['campaigns.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_keywords_campaign_id', 'keywords', ['campaign_id'])

    op.create_table('articles',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('campaign_id', sa.Integer(), nullable=False),
        # NULL for campaign-wide articles
        sa.Column('site_domain', sa.String(255), nullable=True),
        sa.Column('keyword', sa.String(255), nullable=True),
        sa.Column('title', sa.String(500), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('excerpt', sa.Text(), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('category', sa.String(255), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('image_url', sa.String(2083), nullable=True),
        sa.Column('published_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['campaign_id'], ['campaigns.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_articles_campaign_slug', 'articles', ['campaign_id', 'slug'])

    op.create_table('article_queue',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('campaign_id', sa.Integer(), nullable=False),
        sa.Column('site_domain', sa.String(255), nullable=True),
        sa.Column('keyword', sa.String(255), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending'),
        sa.Column('scheduled_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('error', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['campaign_id'], ['campaigns.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    # drip-feed scan: status = 'pending' AND scheduled_at <= now
    op.create_index('idx_article_queue_due', 'article_queue', ['status', 'scheduled_at'])


def downgrade():
    op.drop_index('idx_article_queue_due', table_name='article_queue')
    op.drop_table('article_queue')

    op.drop_index('idx_articles_campaign_slug', table_name='articles')
    op.drop_table('articles')

    op.drop_index('ix_keywords_campaign_id', table_name='keywords')
    op.drop_table('keywords')

    op.drop_table('campaigns')
