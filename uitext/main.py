import os
import datetime
import logging
from flask import Flask, render_template, request, jsonify
from dateutil import tz
from babel import dates

from uitext import translations
from uitext import navigation

app = Flask(__name__)

# Configure Logging
logging.basicConfig(level=logging.INFO)
logger = app.logger

# Configuration
# LANGUAGE and APP_SUB_URL are read per request, see translations/navigation
TIMEZONE_STR = os.environ.get('TIMEZONE', 'Asia/Shanghai')
HOST = os.environ.get('HOST', '0.0.0.0')
PORT = int(os.environ.get('PORT', 5000))

CHINESE_LOCALE = 'zh_CN'


def get_timezone():
    return tz.gettz(TIMEZONE_STR)


def get_locale(language):
    """Babel locale matching the language preference."""
    if translations.is_english(language):
        return translations.ENGLISH
    return CHINESE_LOCALE


def format_today(locale):
    today = datetime.datetime.now(get_timezone()).date()
    try:
        return dates.format_date(today, format='full', locale=locale)
    except Exception as e:
        logger.error(f"Error formatting date for locale '{locale}': {e}")
        return today.isoformat()


@app.route('/')
def index():
    language = translations.get_language_preference()
    locale = get_locale(language)

    return render_template(
        'navigation.html',
        sections=navigation.build_nav_tree(language),
        html_lang=locale.replace('_', '-'),
        today=format_today(locale),
    )


@app.route('/api/navtree')
def navtree():
    return jsonify([section.to_dict() for section in navigation.build_nav_tree()])


@app.route('/api/translate')
def translate_text():
    text = request.args.get('text')
    if text is None:
        return jsonify({'error': "Missing 'text' query parameter"}), 400

    translation = translations.translate(text, request.args.get('lang'))
    return jsonify({
        'text': text,
        'translation': translation,
        'translated': translation != text,
    })


@app.route('/api/translations')
def translation_table():
    return jsonify(dict(translations.TRANSLATIONS))


if __name__ == '__main__':
    app.run(host=HOST, port=PORT, debug=True)
