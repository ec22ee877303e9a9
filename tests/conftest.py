import json

import pytest

SOURCE_URL = "https://www.example.com/recipes/pancakes"

PANCAKES_JSON_LD = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "name": "Simple Pancakes &amp; Syrup",
    "recipeYield": ["4 servings"],
    "prepTime": "PT5M",
    "cookTime": "PT15M",
    "totalTime": "PT20M",
    "recipeIngredient": [
        "1 cup all-purpose flour",
        "2 tablespoons sugar",
        "1 cup milk",
        "1 large egg",
    ],
    "recipeInstructions": [
        {"@type": "HowToStep", "text": "Mix dry ingredients in a bowl."},
        {"@type": "HowToStep", "text": "Add milk and egg. Stir until just combined."},
        {"@type": "HowToStep", "text": "Cook on a hot griddle until golden."},
    ],
}

# Page with structured data, as most recipe sites publish it
JSON_LD_RECIPE_HTML = f"""
<html>
    <head>
        <title>Simple Pancakes | Example Kitchen</title>
        <script type="application/ld+json">
            {json.dumps(PANCAKES_JSON_LD)}
        </script>
    </head>
    <body>
        <h1>Simple Pancakes</h1>
    </body>
</html>
"""

# Page without structured data, with class-tagged list items
MARKUP_RECIPE_HTML = """
<html>
    <head><title>Grandma's Kitchen | Soup</title></head>
    <body>
        <h1 class="site-name">Grandma's Kitchen</h1>
        <h1 class="recipe-title">Tomato &amp; Basil Soup</h1>
        <ul>
            <li class="ingredient-item">2 lb tomatoes</li>
            <li class="ingredient-item"><span>1</span> bunch basil</li>
            <li class="nav">Home</li>
        </ul>
        <ol>
            <li class="instruction">Roast the tomatoes.</li>
            <li class="recipe-instructions__step">Blend with basil.</li>
        </ol>
    </body>
</html>
"""

# Page with neither structured data nor class-tagged list items
NO_RECIPE_HTML = """
<html>
    <head><title>About us</title></head>
    <body>
        <h1>About us</h1>
        <ul><li>We love food.</li></ul>
    </body>
</html>
"""


@pytest.fixture
def source_url():
    return SOURCE_URL


@pytest.fixture
def pancakes_json_ld():
    return json.loads(json.dumps(PANCAKES_JSON_LD))


@pytest.fixture
def json_ld_recipe_html():
    return JSON_LD_RECIPE_HTML


@pytest.fixture
def markup_recipe_html():
    return MARKUP_RECIPE_HTML


@pytest.fixture
def no_recipe_html():
    return NO_RECIPE_HTML


def pytest_collection_modifyitems(items):
    """Add the asyncio marker to coroutine tests that lack one."""
    for item in items:
        if item.get_closest_marker("asyncio") is None:
            if "async" in item.name:
                item.add_marker(pytest.mark.asyncio)
