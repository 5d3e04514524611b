"""
Built-in reference data: languages, modules, lessons, challenges, badges and
two demo accounts. Seeding is skipped when languages already exist.
"""

from sqlalchemy.orm import Session

from malasngoding.models.models import Badge, Challenge, Language, Lesson, Module, User
from malasngoding.utils.jwt import get_password_hash
from malasngoding.utils.logger import get_logger, log_request

logger = get_logger(__name__)

DEMO_USERS = [
    {
        "username": "admin",
        "password": "admin123",
        "email": "admin@malasngoding.com",
        "display_name": "Levi Setiadi",
        "bio": "Creator of Malas Ngoding",
        "role": "admin",
        "avatar_url": "https://ui-avatars.com/api/?name=Levi+Setiadi&background=6d28d9&color=fff",
    },
    {
        "username": "user",
        "password": "user123",
        "email": "user@malasngoding.com",
        "display_name": "Demo User",
        "bio": "Learning to code",
        "role": "student",
        "avatar_url": "https://ui-avatars.com/api/?name=Demo+User&background=a78bfa&color=fff",
    },
]

LANGUAGES = [
    {
        "name": "html",
        "display_name": "HTML",
        "description": "Learn to create the structure of web pages with HTML",
        "icon_url": "/icons/html.svg",
        "color": "#E34F26",
    },
    {
        "name": "css",
        "display_name": "CSS",
        "description": "Style your web pages with CSS",
        "icon_url": "/icons/css.svg",
        "color": "#1572B6",
    },
    {
        "name": "javascript",
        "display_name": "JavaScript",
        "description": "Add interactivity to your websites with JavaScript",
        "icon_url": "/icons/javascript.svg",
        "color": "#F7DF1E",
    },
]

# (language name, title, description, level, level_number, thumbnail, points)
MODULES = [
    ("html", "HTML Basics", "Learn the fundamentals of HTML", "easy", 1, "/images/modules/html-basics.png", 20),
    ("html", "HTML Forms & Tables", "Create interactive forms and structured tables", "medium", 2, "/images/modules/html-forms-tables.png", 30),
    ("html", "HTML5 Advanced Features", "Master semantic HTML5 and advanced features", "hard", 3, "/images/modules/html-advanced.png", 50),
    ("css", "CSS Fundamentals", "Learn basic CSS properties and selectors", "easy", 1, "/images/modules/css-basics.png", 20),
    ("css", "CSS Layout & Positioning", "Master CSS layouts with flexbox and grid", "medium", 2, "/images/modules/css-layout.png", 30),
    ("css", "CSS Animations & Responsive Design", "Create animations and responsive websites", "hard", 3, "/images/modules/css-animations.png", 50),
    ("javascript", "JavaScript Basics", "Learn JavaScript syntax and basic concepts", "easy", 1, "/images/modules/js-basics.png", 20),
    ("javascript", "JavaScript DOM Manipulation", "Learn to interact with the webpage using JavaScript", "medium", 2, "/images/modules/js-dom.png", 40),
    ("javascript", "JavaScript Advanced Concepts", "Master advanced JavaScript concepts and patterns", "hard", 3, "/images/modules/js-advanced.png", 60),
]

HTML_BASICS_LESSONS = [
    {
        "title": "Introduction to HTML",
        "description": "Learn about HTML and its purpose",
        "content": (
            "<h1>Introduction to HTML</h1>\n"
            "<p>HTML (HyperText Markup Language) is the standard markup language for creating web pages. "
            "It describes the structure of a web page.</p>\n"
            "<p>HTML consists of a series of elements that tell the browser how to display the content.</p>"
        ),
        "code_example": (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "  <head>\n"
            "    <title>My First Webpage</title>\n"
            "  </head>\n"
            "  <body>\n"
            "    <h1>Hello, World!</h1>\n"
            "    <p>This is my first webpage.</p>\n"
            "  </body>\n"
            "</html>"
        ),
        "preview_html": "<h1>Hello, World!</h1><p>This is my first webpage.</p>",
        "sort_order": 1,
    },
    {
        "title": "HTML Elements",
        "description": "Learn about HTML elements and tags",
        "content": (
            "<h1>HTML Elements</h1>\n"
            "<p>HTML elements are defined by tags, which are keywords surrounded by angle brackets.</p>\n"
            "<p>HTML tags normally come in pairs like <code>&lt;p&gt;</code> and <code>&lt;/p&gt;</code>. "
            "The first tag in a pair is the start tag, the second tag is the end tag.</p>"
        ),
        "code_example": (
            "<h1>This is a heading</h1>\n"
            "<p>This is a paragraph.</p>\n"
            '<a href="https://www.example.com">This is a link</a>\n'
            '<img src="image.jpg" alt="This is an image">'
        ),
        "preview_html": "<h1>This is a heading</h1><p>This is a paragraph.</p><a>This is a link</a>",
        "sort_order": 2,
    },
]

FIRST_DOCUMENT_CHALLENGE = {
    "title": "Create Your First HTML Document",
    "description": "Create a complete HTML document structure",
    "instructions": (
        "Create a basic HTML document with proper DOCTYPE, html, head, and body tags. "
        "Include a title and a heading inside the body."
    ),
    "initial_code": "<!-- Write your HTML code here -->",
    "expected_output": (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        "  <title>My Page</title>\n"
        "</head>\n"
        "<body>\n"
        "  <h1>My First Heading</h1>\n"
        "</body>\n"
        "</html>"
    ),
    "hints": [
        "Don't forget to include the DOCTYPE declaration",
        "The <title> goes inside the <head> section",
        "The heading <h1> goes inside the <body> section",
    ],
    "sort_order": 1,
    "points": 5,
}

BADGES = [
    {
        "title": "HTML Beginner",
        "description": "Completed the HTML Basics module",
        "image_url": "/badges/html-beginner.svg",
        "category": "html",
        "required_points": 20,
        "level": "beginner",
    },
    {
        "title": "CSS Beginner",
        "description": "Completed the CSS Fundamentals module",
        "image_url": "/badges/css-beginner.svg",
        "category": "css",
        "required_points": 20,
        "level": "beginner",
    },
    {
        "title": "JavaScript Beginner",
        "description": "Completed the JavaScript Basics module",
        "image_url": "/badges/js-beginner.svg",
        "category": "javascript",
        "required_points": 20,
        "level": "beginner",
    },
    {
        "title": "Code Master",
        "description": "Completed all modules with a total of 300+ points",
        "image_url": "/badges/code-master.svg",
        "category": "general",
        "required_points": 300,
        "level": "advanced",
    },
]


def seed_reference_data(db: Session, *, with_demo_users: bool = True) -> bool:
    """Insert the built-in content. Returns False if content was already there."""
    if db.query(Language).first() is not None:
        logger.debug("reference data present, skipping seed")
        return False

    with log_request(logger, "seed reference data"):
        if with_demo_users:
            for u in DEMO_USERS:
                if db.query(User).filter(User.username == u["username"]).first():
                    continue
                data = {k: v for k, v in u.items() if k != "password"}
                db.add(User(hashed_password=get_password_hash(u["password"]), **data))

        languages = {}
        for spec in LANGUAGES:
            lang = Language(**spec)
            db.add(lang)
            languages[spec["name"]] = lang
        db.flush()

        modules = []
        for lang_name, title, description, level, level_number, thumb, points in MODULES:
            module = Module(
                language_id=languages[lang_name].id,
                title=title,
                description=description,
                level=level,
                level_number=level_number,
                thumbnail_url=thumb,
                sort_order=level_number,
                points_to_earn=points,
            )
            db.add(module)
            modules.append(module)
        db.flush()

        html_basics = modules[0]
        lessons = [Lesson(module_id=html_basics.id, **spec) for spec in HTML_BASICS_LESSONS]
        db.add_all(lessons)
        db.flush()

        db.add(Challenge(lesson_id=lessons[0].id, **FIRST_DOCUMENT_CHALLENGE))
        db.add_all(Badge(**spec) for spec in BADGES)
        db.commit()
    return True
