"""Bundled Brazilian Portuguese phrases."""

from __future__ import annotations

from motivar.phrase import Phrase

_RAW: tuple[tuple[str, str], ...] = (
    ("A persistência é o caminho do êxito.", "Charles Chaplin"),
    ("As pessoas costumam dizer que a motivação não dura sempre. Bem, nem o efeito do banho, por isso recomenda-se diariamente.", "Zig Ziglar"),
    ("Motivação é a arte de fazer as pessoas fazerem o que você quer que elas façam porque elas o querem fazer.", "Dwight Eisenhower"),
    ("Toda ação humana, quer se torne positiva ou negativa, precisa depender de motivação.", "Dalai Lama"),
    ("No meio da dificuldade encontra-se a oportunidade.", "Desconhecido"),
    ("Lute. Acredite. Conquiste. Perca. Deseje. Espere. Alcance. Invada. Caia. Seja tudo o quiser ser, mas acima de tudo, seja você sempre.", "Tumblr"),
    ("Eu faço da dificuldade a minha motivação. A volta por cima vem na continuação.", "Charlie Brown Jr"),
    ("A verdadeira motivação vem de realização, desenvolvimento pessoal, satisfação no trabalho e reconhecimento.", "Frederick Herzberg"),
    ("Pedras no caminho? Eu guardo todas. Um dia vou construir um castelo.", "Nemo Nox"),
    ("É parte da cura o desejo de ser curado.", "Sêneca"),
    ("Tudo o que um sonho precisa para ser realizado é alguém que acredite que ele possa ser realizado.", "Roberto Shinyashiki"),
    ("O que me preocupa não é o grito dos maus. É o silêncio dos bons.", "Martin Luther King"),
    ("Imagine uma nova história para sua vida e acredite nela.", "Paulo Coelho"),
    ("O insucesso é apenas uma oportunidade para recomeçar com mais inteligência.", "Henry Ford"),
    ("Quando você quer alguma coisa, todo o universo conspira para que você realize o seu desejo.", "Paulo Coelho"),
    ("Você precisa fazer aquilo que pensa que não é capaz de fazer.", "Eleanor Roosevelt"),
    ("O sucesso é ir de fracasso em fracasso sem perder entusiasmo.", "Winston Churchill"),
    ("Só se pode alcançar um grande êxito quando nos mantemos fiéis a nós mesmos.", "Friedrich Nietzsche"),
    ("Lute com determinação, abrace a vida com paixão, perca com classe e vença com ousadia, porque o mundo pertence a quem se atreve e a vida é muito para ser insignificante.", "Augusto Branco"),
    ("Nossa maior fraqueza está em desistir. O caminho mais certo de vencer é tentar mais uma vez.", "Thomas Edison"),
    ("O sucesso nasce do querer, da determinação e persistência em se chegar a um objetivo. Mesmo não atingindo o alvo, quem busca e vence obstáculos, no mínimo fará coisas admiráveis.", "José de Alencar"),
    ("Se você quer ser bem-sucedido precisa de dedicação total, buscar seu último limite e dar o melhor de si mesmo.", "Ayrton Senna"),
    ("Não crie limites para si mesmo. Você deve ir tão longe quanto sua mente permitir. O que você mais quer pode ser conquistado.", "Mary Kay Ash"),
    ("Nenhum obstáculo será grande se a sua vontade de vencer for maior.", "Autor desconhecido"),
    ("Dificuldades preparam pessoas comuns para destinos extraordinários.", " C.S Lewis"),
    ("Nenhum homem será um grande líder se quiser fazer tudo sozinho ou se quiser levar todo o crédito por fazer isso.", "Andrew Carnegie"),
    ("Bom mesmo é ir à luta com determinação, abraçar a vida com paixão, perder com classe e vencer com ousadia, porque o mundo pertence a quem se atreve e a vida é muito curta, para ser insignificante.", "Charlie Chaplin"),
    ("Pessoas vencedoras não são aquelas que não falham, são aquelas que não desistem.", "Autor desconhecido"),
    ("Só existem dois dias do ano em que você não pode fazer nada: um se chama ontem e outro amanhã.", "Dalai Lama"),
    ("A vida é um constante recomeço. Não se dê por derrotado e siga adiante. As pedras que hoje atrapalham sua caminhada amanhã enfeitarão a sua estrada.", " Autor desconhecido"),
    ("Ouse ir além, ouse fazer diferente e o poder lhe será dado!.", "José Roberto Marques"),
    ("Ouse, arrisque, não desista jamais e saiba valorizar quem te ama, esses sim merecem seu respeito. Quanto ao resto, bom, ninguém nunca precisou de restos para ser feliz.", "Clarice Lispector"),
    ("Para ser um campeão você tem que acreditar em si mesmo quando ninguém mais acredita.", "Muhammad Ali"),
    ("No fim tudo dá certo, e se não deu certo é porque ainda não chegou ao fim.", "Fernando Sabino"),
    ("Você nunca sabe que resultados virão da sua ação. Mas se você não fizer nada, não existirão resultados.", "Mahatma Gandhi"),
    ("O pessimista vê dificuldade em toda oportunidade. O otimista vê oportunidade em toda dificuldade.", "Winston Churchill"),
    ("A paciência é um elemento fundamental do sucesso.", "Bill Gates"),
    ("Reclamar não é uma estratégia. É necessário lidarmos com o mundo como ele é e não como gostaríamos que ele fosse.", "Jeff Bezos"),
    ("O sucesso não tem a ver com o lugar de onde você veio, e sim com a confiança que você tem e o esforço que você está disposto a investir.", "Michelle Obama"),
    ("Você pode encarar um erro como uma besteira a ser esquecida, ou como um resultado que aponta uma nova direção.", "Steve Jobs"),
    ("Você não pode ser uma pessoa difícil, tímida, que não é capaz de olhar alguém nos olhos; você tem que se apresentar. Você tem que saber como falar sobre si mesmo, sua visão, o seu foco e em que você acredita.", "Anna Wintour"),
    ("Eu posso aceitar a falha, todos falham em alguma coisa. Mas eu não posso aceitar não tentar.", "Michael Jordan"),
    ("Gostaria que você soubesse que existe dentro de si uma força capaz de mudar sua vida. Basta que lute e aguarde um novo amanhecer.", "Margaret Thatcher"),
    ("Inteligência é a capacidade de se adaptar às mudanças.", "Stephen Hawking"),
    ("É preciso ser protagonista. Não dá para ficar só ouvindo a banda passar, temos de ser parte da banda.", "Sônia Hess"),
    ("A arte de ser ora audacioso, ora prudente, é a arte de vencer.", "Napoleão Bonaparte"),
    ("Nossos fracassos, às vezes, são mais frutíferos do que os êxitos.", "Henry Ford"),
    ("Comemore os seus sucessos. Veja com humor os seus fracassos.", "Sam Walton"),
    ("Não somos responsáveis apenas pelo que fazemos, mas também pelo que deixamos de fazer.", "Moliere"),
    ("É costume de um tolo, quando erra, queixar-se dos outros. É costume de um sábio queixar-se de si mesmo.", "Sócrates"),
    ("Existe o risco que você jamais pode correr. Existe o risco que você jamais pode deixar de correr.", "Peter Drucker"),
    ("Mesmo que já tenhas feito uma longa caminhada, há sempre um novo caminho a fazer.", "Santo Agostinho"),
    ("A felicidade não está em fazer o que a gente quer, e sim querer o que a gente faz.", "Jean Paul Sartre"),
    ("É sempre divertido fazer o impossível.", "Walt Disney"),
    ("Experiência é o nome que cada um dá a seus erros.", "Oscar Wilde"),
    ("Somente os que ousam errar muito podem realizar muito.", "John F. Kennedy"),
    ("Somos o que repetidamente fazemos. Portanto, a excelência não é um feito, é um hábito.", "Aristóteles"),
    ("Toda empresa precisa ter gente que erra, que não tem medo de errar e que aprende com erro.", "Bill Gates"),
    ("A confiança em si mesmo é o primeiro segredo do sucesso.", "Ralph Waldo Emerson"),
    ("Aquele que pretende ser um líder tem que ser uma ponte.", "Provérbio Galês"),
    ("Muda tuas ideias e mudarás teu mundo.", "Norman Vincent Peale"),
    ("A vitória sempre foi de quem nunca duvidou dela.", "Raul Follerean"),
    ("Se existe uma forma de fazer melhor, descubra-a.", "Thomas Edison"),
    ("O problema é que a maioria das pessoas prefere um elogio que prejudique do que uma crítica que beneficie.", "Norman Vincent Peale"),
    ("A sorte favorece a mente preparada.", "Louis Pasteur"),
    ("Não há sucesso sem dificuldade.", "Sófocles"),
    ("A maior recompensa pelo trabalho não é o que a pessoa ganha, é o que ela se torna através dele.", "John Ruskin"),
    ("Não encontre defeitos, encontre soluções. Qualquer um sabe queixar-se.", "Henry Ford"),
    ("Conhecimento não é aquilo que você sabe, mas o que você faz com aquilo que sabe.", "Aldous Huxley"),
    ("Critica o que fazes, e não faças o que criticas.", "Provérbio Árabe"),
    ("Se sonhar grande dá o mesmo trabalho que sonhar pequeno, por que vou sonhar pequeno?.", "Jorge Paulo Lemann"),
    ("Por vezes sentimos que aquilo que fazemos não é senão uma gota de água no mar. Mas o mar seria menor se lhe faltasse uma gota.", "Madre Teresa de Calcutá"),
    ("Destino não é exterior a nós; somos nós que criamos nosso próprio destino dia após dia.", "Henry Miller"),
    ("Ontem foi ontem, já passou. Hoje é hoje e é o que nos importa. Amanhã, o futuro, a Deus pertence.", "Samuel Klein"),
    ("Você precisa fazer aquilo que pensa que não é capaz de fazer.", "Eleanor Roosevelt"),
    ("Faça o que puder, com o que tiver, onde estiver.", "Theodore Roosevelt"),
    ("A vida é curta demais. Não corra o risco de passar seus dias apenas afinando seu instrumento sem jamais fazer um grande espetáculo.", "Carlos Wizard Martins"),
    ("Tudo que você precisa fazer é mover as pessoas só um pouquinho para mudanças acontecerem. Não precisa ser algo enorme.", "Viola Davis"),
    ("Nossas dúvidas são traidoras e nos fazem perder, por medo de tentar, o que poderíamos ganhar.", "William Shakespeare"),
    ("Se você quer fazer uma coisa realmente grande, seja grande como a coisa que você quer fazer.", "Nizan Guanaes"),
    ("Aquele que é feliz, espalha felicidade. Aquele que teima na infelicidade, que perde o equilíbrio e a confiança, perde-se na vida.", "Anne Frank"),
    ("Os problemas são apenas oportunidades com roupas de trabalho.", "Henry John Kaiser"),
    ("Na crise, existem aqueles que se abatem, sentam no chão e choram; e existem aqueles que fabricam e vendem lenços. Nós somos fabricantes de lenços.", "Abilio Diniz"),
    ("Levanto a minha voz, não para que eu possa gritar, mas para que aqueles sem voz possam ser ouvidos….", "Malala Yousafzai"),
    ("Em todas as situações, deve-se considerar o objetivo.", "Jean de La Fontaine"),
    ("Se você quer saber o quanto você é forte, é na necessidade que descobrimos que somos gigantes.", "Cleusa Maria da Silva"),
    ("Só se aprende com a experiência. Portanto, não importa o que as pessoas lhe digam, você tem que viver e cometer seus próprios erros para aprender.", "Emma Watson"),
    ("É o motivo que engrandece a ação; é o fazer, não o feito.", "Margaret Preston"),
    ("Um grande líder é exemplo pela atitude, não pelo discurso.", "Robinson Shiba"),
    ("Sucesso é mais frequentemente alcançado por aqueles que não sabem que o fracasso é inevitável.", "Coco Chanel"),
    ("Quem vive sem disciplina morre sem honra.", "Provérbio islandês"),
    ("Um dia é preciso parar de sonhar, tirar os planos da gaveta e, de algum modo, começar.", "Amyr Klink"),
    ("A maior descoberta de todos os tempos é que uma pessoa pode mudar, simplesmente mudando de atitude.", "Oprah Winfrey"),
    ("Mesmo se você estiver no caminho certo será atropelado se ficar sentado nele.", "Will Rogers"),
    ("O fundamental é manter sempre a mesma obsessão em alcançar o sucesso. Ter sucesso não é apenas ter dinheiro, mas sim saber que uma ideia que parece impossível pode vir a ser uma empresa que irá quebrar paradigmas.", "Romero Rodrigues"),
    ("O jeito mais eficiente de fazer algo é fazendo.", "Amelia Earhart"),
    ("O insucesso é uma oportunidade para recomeçar com mais inteligência.", "Henry Ford"),
    ("O liderado será reflexo da sua liderança, então quem espera lealdade, primeiro deve ser leal.", "Flávio Augusto."),
    ("Sozinhos, pouco podemos fazer; juntos, podemos fazer muito.", "Helen Keller"),
    ("Uma atitude vitoriosa é meio caminho andado para o sucesso.", "Arthur Riedel"),
)

PHRASES_BR: tuple[Phrase, ...] = tuple(
    Phrase(author=author, phrase=text) for text, author in _RAW
)