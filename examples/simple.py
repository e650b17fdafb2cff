import os
import sys
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from tag_matchers import configure_logging, check, have_time_select, have_date_select

configure_logging()

rendered = """
<select id="event_start_time_4i" name="event[start_time(4i)]"><option value="09">09</option></select>
: <select id="event_start_time_5i" name="event[start_time(5i)]"><option value="30">30</option></select>
"""


def main():
	for matcher in (have_time_select().for_({'event': 'start_time'}), have_date_select().for_({'event': 'start_time'})):
		result = check(rendered, matcher)
		print(f"{matcher.description()}: {'ok' if result.success else result.message}")


if __name__ == '__main__':
	main()
