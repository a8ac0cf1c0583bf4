from assessment.bank import QUESTION_BANK
from assessment.models import Section


def post_answer(client, section, question, answer, url='/save_answer'):
    return client.post(url, json={
        'section': section.slug,
        'question_number': question.number,
        'answer': answer,
    })


def complete_assessment(client, likert, technical_correct=True):
    client.post('/start')
    for section in (Section.PSYCHOLOGICAL, Section.TECHNICAL, Section.WISCAR):
        for question in QUESTION_BANK[section]:
            if section is Section.TECHNICAL:
                answer = question.correct_index if technical_correct else (question.correct_index + 1) % 4
            else:
                answer = likert
            response = post_answer(client, section, question, answer)
            assert response.get_json()['success'] is True
    return response


def test_index(client):
    response = client.get('/')
    assert response.status_code == 200
    assert b'Start Assessment' in response.data


def test_assessment_without_session_redirects(client):
    response = client.get('/assessment')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/')


def test_start_renders_first_question(client):
    response = client.post('/start')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/assessment')

    page = client.get('/assessment')
    assert page.status_code == 200
    assert QUESTION_BANK[Section.PSYCHOLOGICAL][0].text.encode() in page.data.replace(b'&#39;', b"'")


def test_save_answer_without_session(client):
    response = client.post('/save_answer', json={'question_number': 1, 'answer': 3})
    assert response.get_json() == {'success': False, 'redirect': '/'}


def test_save_answer_without_selection_is_rejected(client):
    client.post('/start')
    question = QUESTION_BANK[Section.PSYCHOLOGICAL][0]
    response = post_answer(client, Section.PSYCHOLOGICAL, question, None)
    assert response.status_code == 400
    assert response.get_json()['success'] is False

    scores = client.get('/get_current_scores').get_json()
    assert scores['section'] == 'psychological'
    assert scores['progress'] == 20


def test_save_answer_rejects_out_of_range_and_wrong_question(client):
    client.post('/start')
    first, second = QUESTION_BANK[Section.PSYCHOLOGICAL][:2]
    assert post_answer(client, Section.PSYCHOLOGICAL, first, 9).status_code == 400
    assert post_answer(client, Section.PSYCHOLOGICAL, second, 3).status_code == 400
    assert post_answer(client, Section.PSYCHOLOGICAL, first, 'abc').status_code == 400


def test_select_then_save_commits_pending(client):
    client.post('/start')
    question = QUESTION_BANK[Section.PSYCHOLOGICAL][0]
    assert post_answer(client, Section.PSYCHOLOGICAL, question, 4, url='/select_answer').get_json() == {'success': True}

    response = post_answer(client, Section.PSYCHOLOGICAL, question, None)
    data = response.get_json()
    assert data['success'] is True
    assert data['section_complete'] is False
    assert data['redirect'] == '/assessment'


def test_section_completion_reported(client):
    client.post('/start')
    questions = QUESTION_BANK[Section.PSYCHOLOGICAL]
    for question in questions[:-1]:
        post_answer(client, Section.PSYCHOLOGICAL, question, 5)
    data = post_answer(client, Section.PSYCHOLOGICAL, questions[-1], 5).get_json()
    assert data['section_complete'] is True
    assert data['progress'] == 40

    scores = client.get('/get_current_scores').get_json()
    assert scores['section'] == 'technical'
    assert scores['scores']['psychological'] == 100


def test_results_before_completion_redirect(client):
    client.post('/start')
    assert client.get('/results').status_code == 302
    assert client.get('/report').status_code == 302


def test_full_flow_results(client):
    last = complete_assessment(client, likert=5)
    assert last.get_json()['redirect'] == '/results'
    assert client.get('/assessment').headers['Location'].endswith('/results')

    page = client.get('/results')
    assert page.status_code == 200
    assert b'100%' in page.data
    assert b'Recommendation: Yes' in page.data


def test_report_download(client):
    complete_assessment(client, likert=3, technical_correct=False)
    response = client.get('/report')
    assert response.status_code == 200
    assert 'attachment' in response.headers['Content-Disposition']

    report = response.get_json()
    assert report['psychological'] == 50
    assert report['technical'] == 0
    assert report['overall_score'] == 33
    assert report['recommendation'] == 'No'
    assert client.get('/report').get_json() == report


def test_restart_clears_session(client):
    client.post('/start')
    assert client.get('/restart').status_code == 302
    assert client.get('/get_current_scores').status_code == 404


def test_corrupt_session_is_discarded(client):
    with client.session_transaction() as session:
        session['assessment'] = {'section': 'nowhere'}
    response = client.get('/assessment')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/')


def committed_answers(client, section):
    with client.session_transaction() as session:
        return session['assessment']['answers'][section.slug]


def test_save_with_explicit_answer_overrides_pending(client):
    client.post('/start')
    question = QUESTION_BANK[Section.PSYCHOLOGICAL][0]
    post_answer(client, Section.PSYCHOLOGICAL, question, 2, url='/select_answer')

    response = post_answer(client, Section.PSYCHOLOGICAL, question, 4)
    assert response.get_json()['success'] is True
    assert committed_answers(client, Section.PSYCHOLOGICAL) == [4]


def test_save_with_explicit_answer_ignores_stale_session_selection(client):
    client.post('/start')
    question = QUESTION_BANK[Section.PSYCHOLOGICAL][0]
    post_answer(client, Section.PSYCHOLOGICAL, question, 2, url='/select_answer')
    with client.session_transaction() as session:
        stale = dict(session['assessment'])

    post_answer(client, Section.PSYCHOLOGICAL, question, 4, url='/select_answer')
    # a late response from the first selection lands after the second one
    with client.session_transaction() as session:
        session['assessment'] = stale

    post_answer(client, Section.PSYCHOLOGICAL, question, 4)
    assert committed_answers(client, Section.PSYCHOLOGICAL) == [4]


def test_next_button_sends_checked_answer(client):
    client.post('/start')
    page = client.get('/assessment').data
    assert b'payload(answer)' in page
    assert b'payload(null)' not in page


def test_results_page_rounds_wiscar_average_half_up(client):
    client.post('/start')
    for question in QUESTION_BANK[Section.PSYCHOLOGICAL]:
        post_answer(client, Section.PSYCHOLOGICAL, question, 3)
    for question in QUESTION_BANK[Section.TECHNICAL]:
        post_answer(client, Section.TECHNICAL, question, question.correct_index)
    # will, skill and ability at 50; interest, cognitive and reality at 75 -> average 62.5
    for question in QUESTION_BANK[Section.WISCAR]:
        answer = 3 if question.category in ('will', 'skill', 'ability') else 4
        post_answer(client, Section.WISCAR, question, answer)

    page = client.get('/results').data
    assert b'WISCAR Analysis: <span class="warning">63%</span>' in page


def test_testing_config_defaults(app):
    assert app.config['PROGRESS_MODE'] == 'stepped'
    assert app.config['CAREER_TRACK'] == 'Power BI & Tableau'
    assert app.config['TESTING'] is True
