# app.py
from flask import Flask, render_template, request, session, redirect, url_for, jsonify
import logging
import os
from config import config
from assessment.errors import AssessmentError
from assessment.models import Section
from assessment.orchestrator import AssessmentOrchestrator
from assessment.results import score_band
from assessment.scoring import round_half_up
from questions.psychometric_questions import LIKERT_SCALE
from questions.wiscar_questions import WISCAR_DESCRIPTIONS

logger = logging.getLogger(__name__)


# --- Configuration / App factory ------------------------------------------------
def create_app(env=None):
    app = Flask(__name__)

    # Configuration
    env = env or os.environ.get('FLASK_ENV', 'default')
    app.config.from_object(config[env])

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    logger.debug(f"App created with '{env}' configuration")

    @app.context_processor
    def inject_globals():
        return {'career_track': app.config['CAREER_TRACK'],
                'score_band': score_band,
                'round_half_up': round_half_up}

    return app

app = create_app()


# --- Session helpers -------------------------------------------------------------
def load_assessment():
    """Rebuild the orchestrator from the session snapshot. Returns None when there is none."""
    data = session.get('assessment')
    if data is None:
        return None

    try:
        return AssessmentOrchestrator.from_dict(data, progress_mode=app.config['PROGRESS_MODE'])
    except (AttributeError, KeyError, TypeError, ValueError, AssessmentError) as e:
        logger.warning(f"Discarding unreadable assessment session: {e}")
        session.pop('assessment', None)
        return None


def save_assessment(orchestrator):
    session['assessment'] = orchestrator.to_dict()
    session.modified = True


def parse_int(value):
    """Strict int parsing for JSON payload values; raises ValueError for anything else."""
    if isinstance(value, bool):
        raise ValueError(f"Not an integer: {value!r}")
    return int(str(value))


def read_answer_payload(orchestrator):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object")
    section = data.get('section') or orchestrator.section.slug
    question_number = parse_int(data.get('question_number'))
    answer = data.get('answer')
    value = parse_int(answer) if answer not in (None, '') else None
    return section, question_number, value


# --- Routes ----------------------------------------------------------------------
@app.route('/')
def index():
    return render_template('index.html')


@app.route('/start', methods=['POST'])
def start_assessment():
    session.clear()
    orchestrator = AssessmentOrchestrator(progress_mode=app.config['PROGRESS_MODE'])
    orchestrator.start()
    save_assessment(orchestrator)
    return redirect(url_for('assessment'))


@app.route('/assessment')
def assessment():
    orchestrator = load_assessment()
    # if session not initialized, redirect to index
    if orchestrator is None or orchestrator.section is Section.INTRO:
        return redirect(url_for('index'))
    if orchestrator.is_complete:
        return redirect(url_for('results'))

    sequencer = orchestrator.current_sequencer
    question = sequencer.current_question
    answered, total = sequencer.progress
    return render_template('assessment.html',
                           section=orchestrator.section,
                           statuses=orchestrator.section_statuses(),
                           progress=orchestrator.progress,
                           question=question,
                           pending=sequencer.pending,
                           likert_scale=LIKERT_SCALE,
                           dimension_description=WISCAR_DESCRIPTIONS.get(question.category),
                           section_percent=sequencer.percent_complete,
                           current_question=answered + 1,
                           total_questions=total)


# --- Answer saving ---------------------------------------------------------------
@app.route('/select_answer', methods=['POST'])
def select_answer():
    orchestrator = load_assessment()
    if orchestrator is None:
        return jsonify({'success': False, 'redirect': url_for('index')})

    try:
        section, question_number, value = read_answer_payload(orchestrator)
        if value is None:
            return jsonify({'success': False, 'error': 'No answer selected'}), 400
        orchestrator.select_answer(section, question_number, value)
    except (TypeError, ValueError, AssessmentError) as e:
        return jsonify({'success': False, 'error': str(e)}), 400

    save_assessment(orchestrator)
    return jsonify({'success': True})


@app.route('/save_answer', methods=['POST'])
def save_answer():
    orchestrator = load_assessment()
    if orchestrator is None:
        return jsonify({'success': False, 'redirect': url_for('index')})

    try:
        section, question_number, value = read_answer_payload(orchestrator)
        section_complete = orchestrator.submit_answer(section, question_number, value)
    except (TypeError, ValueError, AssessmentError) as e:
        logger.warning(f"Rejected answer: {e}")
        return jsonify({'success': False, 'error': str(e)}), 400

    save_assessment(orchestrator)
    target = 'results' if orchestrator.is_complete else 'assessment'
    return jsonify({'success': True,
                    'section_complete': section_complete,
                    'progress': orchestrator.progress,
                    'redirect': url_for(target)})


# --- Live Scores Endpoint --------------------------------------------------------
@app.route('/get_current_scores')
def get_current_scores():
    """Endpoint to get progress and completed section scores for live display"""
    orchestrator = load_assessment()
    if orchestrator is None:
        return jsonify({'error': 'No assessment in progress'}), 404

    return jsonify({
        'section': orchestrator.section.slug,
        'progress': orchestrator.progress,
        'scores': orchestrator.current_scores(),
        'error': None
    })


# --- Results ---------------------------------------------------------------------
@app.route('/results')
def results():
    orchestrator = load_assessment()
    if orchestrator is None or not orchestrator.is_complete:
        return redirect(url_for('index'))

    result = orchestrator.get_results()
    return render_template('results.html',
                           result=result,
                           statuses=orchestrator.section_statuses(),
                           progress=orchestrator.progress)


@app.route('/report')
def report():
    orchestrator = load_assessment()
    if orchestrator is None or not orchestrator.is_complete:
        return redirect(url_for('index'))

    response = jsonify(orchestrator.get_results().to_dict())
    response.headers['Content-Disposition'] = 'attachment; filename=assessment-report.json'
    return response


@app.route('/restart')
def restart():
    session.clear()
    return redirect(url_for('index'))


# --- Run (development only) ------------------------------------------------------
if __name__ == '__main__':
    if app.config.get('DEBUG', False):
        app.run(debug=True)
    else:
        port_env = os.getenv('port') or os.getenv('PORT') or "5000"
        try:
            port = int(port_env)
        except ValueError:
            port = 5000
        app.run(host='0.0.0.0', port=port)
