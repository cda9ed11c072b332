from django import template

register = template.Library()


@register.simple_tag(takes_context=True)
def url_replace(context, **kwargs):
    """Current query string with some parameters replaced, for pagination links"""
    query = context["request"].GET.copy()
    for key, value in kwargs.items():
        if value in (None, ""):
            query.pop(key, None)
        else:
            query[key] = value
    return query.urlencode()


@register.filter
def is_file(value):
    """True for a populated FileField/ImageField value"""
    return bool(value) and hasattr(value, "url")


@register.filter
def stat_label(key):
    """total_news -> News"""
    return key.removeprefix("total_").replace("_", " ").title()
