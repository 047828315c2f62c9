"""The small catalogue page, written once per engine."""

SMALL_WHISKER = """\
<h1>{{title}}</h1>
<ul>
{{#items}}<li>{{name}}: {{price}}</li>
{{/items}}
</ul>
{{^items}}<p>No items</p>{{/items}}"""

SMALL_JINJA2 = """\
<h1>{{ title }}</h1>
<ul>
{% for item in items %}<li>{{ item.name }}: {{ item.price }}</li>
{% endfor %}
</ul>
{% if not items %}<p>No items</p>{% endif %}"""
