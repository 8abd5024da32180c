from storefront.extensions import db
from storefront.services.category_service import CategoryService
from storefront.exceptions import CatalogError


def register_commands(app):
    """Register flask CLI commands"""

    @app.cli.command()
    def init_db():
        """Initialize database"""
        db.create_all()
        print('Database initialized successfully!')

    @app.cli.command()
    def drop_db():
        """Drop all tables"""
        if input('Are you sure you want to drop all tables? (yes/no): ') == 'yes':
            db.drop_all()
            print('Database dropped successfully!')
        else:
            print('Operation cancelled')

    @app.cli.command()
    def create_category():
        """Register a category"""
        name = input('Category name: ')

        try:
            category = CategoryService.create_category(name)
        except CatalogError as e:
            print(f'Could not create category: {e.message}')
            return

        print(f'Category {category.name} created successfully!')
