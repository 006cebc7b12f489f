"""Built-in word catalog seeded on first use. Ids are stable."""

BUILTIN_WORDS = [
    # --- middle1 ---
    {'id': 'm1-001', 'term': 'apple', 'pronunciation': '/ˈæp.əl/', 'part_of_speech': '명사', 'meaning': '사과',
     'example_sentence': 'I eat an apple every morning.', 'example_sentence_meaning': '나는 매일 아침 사과를 먹는다.',
     'grade_level': 'middle1', 'unit': '1'},
    {'id': 'm1-002', 'term': 'friend', 'pronunciation': '/frend/', 'part_of_speech': '명사', 'meaning': '친구',
     'example_sentence': 'She is my best friend.', 'example_sentence_meaning': '그녀는 나의 가장 친한 친구이다.',
     'grade_level': 'middle1', 'unit': '1'},
    {'id': 'm1-003', 'term': 'school', 'pronunciation': '/skuːl/', 'part_of_speech': '명사', 'meaning': '학교',
     'example_sentence': 'We walk to school together.', 'example_sentence_meaning': '우리는 함께 걸어서 학교에 간다.',
     'grade_level': 'middle1', 'unit': '1'},
    {'id': 'm1-004', 'term': 'happy', 'pronunciation': '/ˈhæp.i/', 'part_of_speech': '형용사', 'meaning': '행복한',
     'example_sentence': 'The children look happy.', 'example_sentence_meaning': '아이들이 행복해 보인다.',
     'grade_level': 'middle1', 'unit': '2'},
    {'id': 'm1-005', 'term': 'library', 'pronunciation': '/ˈlaɪ.brer.i/', 'part_of_speech': '명사', 'meaning': '도서관',
     'example_sentence': 'I borrowed two books from the library.', 'example_sentence_meaning': '나는 도서관에서 책 두 권을 빌렸다.',
     'grade_level': 'middle1', 'unit': '2'},
    {'id': 'm1-006', 'term': 'weather', 'pronunciation': '/ˈweð.ər/', 'part_of_speech': '명사', 'meaning': '날씨',
     'example_sentence': 'The weather is nice today.', 'example_sentence_meaning': '오늘은 날씨가 좋다.',
     'grade_level': 'middle1', 'unit': '2'},
    {'id': 'm1-007', 'term': 'visit', 'pronunciation': '/ˈvɪz.ɪt/', 'part_of_speech': '동사', 'meaning': '방문하다',
     'example_sentence': 'We will visit our grandparents this weekend.', 'example_sentence_meaning': '우리는 이번 주말에 조부모님을 방문할 것이다.',
     'grade_level': 'middle1', 'unit': '3'},
    {'id': 'm1-008', 'term': 'favorite', 'pronunciation': '/ˈfeɪ.vər.ɪt/', 'part_of_speech': '형용사', 'meaning': '가장 좋아하는',
     'example_sentence': 'Blue is my favorite color.', 'example_sentence_meaning': '파란색은 내가 가장 좋아하는 색이다.',
     'grade_level': 'middle1', 'unit': '3'},
    {'id': 'm1-009', 'term': 'breakfast', 'pronunciation': '/ˈbrek.fəst/', 'part_of_speech': '명사', 'meaning': '아침 식사',
     'example_sentence': 'Did you have breakfast?', 'example_sentence_meaning': '아침 먹었니?',
     'grade_level': 'middle1', 'unit': '3'},
    {'id': 'm1-010', 'term': 'practice', 'pronunciation': '/ˈpræk.tɪs/', 'part_of_speech': '동사', 'meaning': '연습하다',
     'example_sentence': 'I practice the piano every day.', 'example_sentence_meaning': '나는 매일 피아노를 연습한다.',
     'grade_level': 'middle1', 'unit': '4'},
    # --- middle2 ---
    {'id': 'm2-001', 'term': 'environment', 'pronunciation': '/ɪnˈvaɪ.rən.mənt/', 'part_of_speech': '명사', 'meaning': '환경',
     'example_sentence': 'We should protect the environment.', 'example_sentence_meaning': '우리는 환경을 보호해야 한다.',
     'grade_level': 'middle2', 'unit': '1'},
    {'id': 'm2-002', 'term': 'experience', 'pronunciation': '/ɪkˈspɪə.ri.əns/', 'part_of_speech': '명사', 'meaning': '경험',
     'example_sentence': 'Traveling abroad was a great experience.', 'example_sentence_meaning': '해외여행은 멋진 경험이었다.',
     'grade_level': 'middle2', 'unit': '1'},
    {'id': 'm2-003', 'term': 'prepare', 'pronunciation': '/prɪˈpeər/', 'part_of_speech': '동사', 'meaning': '준비하다',
     'example_sentence': 'She prepared dinner for her family.', 'example_sentence_meaning': '그녀는 가족을 위해 저녁을 준비했다.',
     'grade_level': 'middle2', 'unit': '1'},
    {'id': 'm2-004', 'term': 'difficult', 'pronunciation': '/ˈdɪf.ɪ.kəlt/', 'part_of_speech': '형용사', 'meaning': '어려운',
     'example_sentence': 'The math test was difficult.', 'example_sentence_meaning': '수학 시험은 어려웠다.',
     'grade_level': 'middle2', 'unit': '2'},
    {'id': 'm2-005', 'term': 'invent', 'pronunciation': '/ɪnˈvent/', 'part_of_speech': '동사', 'meaning': '발명하다',
     'example_sentence': 'Who invented the telephone?', 'example_sentence_meaning': '누가 전화기를 발명했니?',
     'grade_level': 'middle2', 'unit': '2'},
    {'id': 'm2-006', 'term': 'culture', 'pronunciation': '/ˈkʌl.tʃər/', 'part_of_speech': '명사', 'meaning': '문화',
     'example_sentence': 'I am interested in Korean culture.', 'example_sentence_meaning': '나는 한국 문화에 관심이 있다.',
     'grade_level': 'middle2', 'unit': '2'},
    {'id': 'm2-007', 'term': 'healthy', 'pronunciation': '/ˈhel.θi/', 'part_of_speech': '형용사', 'meaning': '건강한',
     'example_sentence': 'Eating vegetables keeps you healthy.', 'example_sentence_meaning': '채소를 먹으면 건강을 유지할 수 있다.',
     'grade_level': 'middle2', 'unit': '3'},
    {'id': 'm2-008', 'term': 'volunteer', 'pronunciation': '/ˌvɒl.ənˈtɪər/', 'part_of_speech': '명사', 'meaning': '자원봉사자',
     'example_sentence': 'The volunteers cleaned the park.', 'example_sentence_meaning': '자원봉사자들이 공원을 청소했다.',
     'grade_level': 'middle2', 'unit': '3'},
    {'id': 'm2-009', 'term': 'decide', 'pronunciation': '/dɪˈsaɪd/', 'part_of_speech': '동사', 'meaning': '결정하다',
     'example_sentence': 'He decided to join the soccer club.', 'example_sentence_meaning': '그는 축구부에 가입하기로 결정했다.',
     'grade_level': 'middle2', 'unit': '4'},
    {'id': 'm2-010', 'term': 'journey', 'pronunciation': '/ˈdʒɜː.ni/', 'part_of_speech': '명사', 'meaning': '여행, 여정',
     'example_sentence': 'The journey took three hours.', 'example_sentence_meaning': '여정은 세 시간이 걸렸다.',
     'grade_level': 'middle2', 'unit': '4'},
    # --- middle3 ---
    {'id': 'm3-001', 'term': 'achieve', 'pronunciation': '/əˈtʃiːv/', 'part_of_speech': '동사', 'meaning': '성취하다',
     'example_sentence': 'You can achieve your goals with effort.', 'example_sentence_meaning': '노력하면 목표를 성취할 수 있다.',
     'grade_level': 'middle3', 'unit': '1'},
    {'id': 'm3-002', 'term': 'influence', 'pronunciation': '/ˈɪn.flu.əns/', 'part_of_speech': '명사', 'meaning': '영향',
     'example_sentence': 'Music has a strong influence on people.', 'example_sentence_meaning': '음악은 사람들에게 강한 영향을 준다.',
     'grade_level': 'middle3', 'unit': '1'},
    {'id': 'm3-003', 'term': 'opportunity', 'pronunciation': '/ˌɒp.əˈtʃuː.nə.ti/', 'part_of_speech': '명사', 'meaning': '기회',
     'example_sentence': 'This is a great opportunity to learn.', 'example_sentence_meaning': '이것은 배울 수 있는 좋은 기회이다.',
     'grade_level': 'middle3', 'unit': '1'},
    {'id': 'm3-004', 'term': 'responsible', 'pronunciation': '/rɪˈspɒn.sə.bəl/', 'part_of_speech': '형용사', 'meaning': '책임 있는',
     'example_sentence': 'She is responsible for the project.', 'example_sentence_meaning': '그녀는 그 프로젝트를 책임지고 있다.',
     'grade_level': 'middle3', 'unit': '2'},
    {'id': 'm3-005', 'term': 'consider', 'pronunciation': '/kənˈsɪd.ər/', 'part_of_speech': '동사', 'meaning': '고려하다',
     'example_sentence': 'Please consider my suggestion.', 'example_sentence_meaning': '제 제안을 고려해 주세요.',
     'grade_level': 'middle3', 'unit': '2'},
    {'id': 'm3-006', 'term': 'pollution', 'pronunciation': '/pəˈluː.ʃən/', 'part_of_speech': '명사', 'meaning': '오염',
     'example_sentence': 'Air pollution is a serious problem.', 'example_sentence_meaning': '대기 오염은 심각한 문제이다.',
     'grade_level': 'middle3', 'unit': '2'},
    {'id': 'm3-007', 'term': 'independent', 'pronunciation': '/ˌɪn.dɪˈpen.dənt/', 'part_of_speech': '형용사', 'meaning': '독립적인',
     'example_sentence': 'He wants to be independent from his parents.', 'example_sentence_meaning': '그는 부모님으로부터 독립하고 싶어 한다.',
     'grade_level': 'middle3', 'unit': '3'},
    {'id': 'm3-008', 'term': 'survive', 'pronunciation': '/səˈvaɪv/', 'part_of_speech': '동사', 'meaning': '살아남다',
     'example_sentence': 'Plants cannot survive without water.', 'example_sentence_meaning': '식물은 물 없이 살아남을 수 없다.',
     'grade_level': 'middle3', 'unit': '3'},
    {'id': 'm3-009', 'term': 'generation', 'pronunciation': '/ˌdʒen.əˈreɪ.ʃən/', 'part_of_speech': '명사', 'meaning': '세대',
     'example_sentence': 'Stories pass from generation to generation.', 'example_sentence_meaning': '이야기는 세대에서 세대로 전해진다.',
     'grade_level': 'middle3', 'unit': '4'},
    {'id': 'm3-010', 'term': 'ancient', 'pronunciation': '/ˈeɪn.ʃənt/', 'part_of_speech': '형용사', 'meaning': '고대의',
     'example_sentence': 'We visited an ancient temple.', 'example_sentence_meaning': '우리는 고대 사원을 방문했다.',
     'grade_level': 'middle3', 'unit': '4'},
]
