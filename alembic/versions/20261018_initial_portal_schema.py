"""
initial portal schema: users, mentors, notes, events and directory tables

Revision ID: 20261018_initial_portal_schema
Revises:
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '20261018_initial_portal_schema'
down_revision = None
branch_labels = None
depends_on = None

user_role = sa.Enum('student', 'senior', 'admin', name='userrole')


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('first_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('profile_image_url', sa.String(), nullable=True),
        sa.Column('year', sa.Integer(), nullable=True),
        sa.Column('program', sa.String(), nullable=True),
        sa.Column('department', sa.String(), nullable=True),
        sa.Column('intro', sa.Text(), nullable=True),
        sa.Column('skills', sa.JSON(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('role', user_role, nullable=False, server_default='student'),
        sa.Column('socials', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_department', 'users', ['department'])

    op.create_table(
        'mentors',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('interests', sa.JSON(), nullable=True),
        sa.Column('availability', sa.Text(), nullable=True),
        sa.Column('contact_whatsapp', sa.String(), nullable=True),
        sa.Column('contact_email', sa.String(), nullable=True),
        sa.Column('rating', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_available', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
    )
    op.create_index('ix_mentors_user_id', 'mentors', ['user_id'])

    op.create_table(
        'notes',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('dept', sa.String(), nullable=False),
        sa.Column('semester', sa.Integer(), nullable=False),
        sa.Column('course_code', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('file_url', sa.String(), nullable=False),
        sa.Column('pages', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('uploaded_by', sa.String(), nullable=False),
        sa.Column('downloads', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['uploaded_by'], ['users.id'], ),
    )
    op.create_index('ix_notes_dept', 'notes', ['dept'])
    op.create_index('ix_notes_course_code', 'notes', ['course_code'])
    op.create_index('ix_notes_uploaded_by', 'notes', ['uploaded_by'])
    op.create_index('ix_notes_created_at', 'notes', ['created_at'])

    op.create_table(
        'events',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('organizer', sa.String(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('link', sa.String(), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('created_by', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], ),
    )
    op.create_index('ix_events_date', 'events', ['date'])
    op.create_index('ix_events_created_by', 'events', ['created_by'])

    op.create_table(
        'clubs',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('instagram', sa.String(), nullable=True),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('meeting_time', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_clubs_category', 'clubs', ['category'])

    op.create_table(
        'opportunities',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('deadline', sa.Date(), nullable=True),
        sa.Column('link', sa.String(), nullable=True),
        sa.Column('contact', sa.String(), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_opportunities_type', 'opportunities', ['type'])
    op.create_index('ix_opportunities_created_at', 'opportunities', ['created_at'])

    op.create_table(
        'projects_ifp',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('dept', sa.String(), nullable=False),
        sa.Column('area', sa.String(), nullable=False),
        sa.Column('brief', sa.Text(), nullable=True),
        sa.Column('guide_name', sa.String(), nullable=False),
        sa.Column('contact', sa.String(), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('link', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_projects_ifp_dept', 'projects_ifp', ['dept'])

    op.create_table(
        'links',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('label', sa.String(), nullable=False),
        sa.Column('url', sa.String(), nullable=False),
        sa.Column('group', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_links_group', 'links', ['group'])

    op.create_table(
        'discussions_channels',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('label', sa.String(), nullable=False),
        sa.Column('platform', sa.String(), nullable=False),
        sa.Column('url', sa.String(), nullable=False),
        sa.Column('topic_tags', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_discussions_channels_platform', 'discussions_channels', ['platform'])


def downgrade() -> None:
    op.drop_index('ix_discussions_channels_platform', table_name='discussions_channels')
    op.drop_table('discussions_channels')
    op.drop_index('ix_links_group', table_name='links')
    op.drop_table('links')
    op.drop_index('ix_projects_ifp_dept', table_name='projects_ifp')
    op.drop_table('projects_ifp')
    op.drop_index('ix_opportunities_created_at', table_name='opportunities')
    op.drop_index('ix_opportunities_type', table_name='opportunities')
    op.drop_table('opportunities')
    op.drop_index('ix_clubs_category', table_name='clubs')
    op.drop_table('clubs')
    op.drop_index('ix_events_created_by', table_name='events')
    op.drop_index('ix_events_date', table_name='events')
    op.drop_table('events')
    op.drop_index('ix_notes_created_at', table_name='notes')
    op.drop_index('ix_notes_uploaded_by', table_name='notes')
    op.drop_index('ix_notes_course_code', table_name='notes')
    op.drop_index('ix_notes_dept', table_name='notes')
    op.drop_table('notes')
    op.drop_index('ix_mentors_user_id', table_name='mentors')
    op.drop_table('mentors')
    op.drop_index('ix_users_department', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')
    user_role.drop(op.get_bind(), checkfirst=True)
